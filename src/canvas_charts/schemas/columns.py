"""Strongly typed column names for the dashboard data feeds.

Defines the data contract between upstream KPI payloads and the widgets.
"""


class ColumnNames:
    """Column name constants used by the cash flow and aging feeds."""

    # Cash outflow forecast
    DATE_LABEL = "date_label"
    MONTH = "month"
    CUMULATIVE_ACTUAL_USD = "cumulative_actual_usd"
    CUMULATIVE_PROJECTED_USD = "cumulative_projected_usd"
    CUMULATIVE_BUDGET_USD = "cumulative_budget_usd"
    PERIOD_STATUS = "period_status"

    # AP aging
    BUCKET = "bucket"
    AMOUNT_INR = "amount_inr"

    # Generic engine defaults
    CLUSTER = "cluster"
    CUMULATIVE_PCT = "cumulative_pct"


class PeriodStatus:
    """Values of the period_status column."""

    ACTUAL = "ACTUAL"
    CURRENT = "CURRENT"
    PROJECTED = "PROJECTED"


# Per-row fallbacks tried when the resolved column is empty for a row.
VALUE_ALIASES = {
    "vertical_bar_chart": ("total_spend",),
    "pareto_chart": ("value", "amount"),
}
LABEL_ALIASES = {
    "vertical_bar_chart": ("category",),
    "pareto_chart": ("category", "label"),
}
CUMULATIVE_ALIASES = (ColumnNames.CUMULATIVE_PCT, "cumulative")
