"""Column role inference.

Works out which dataset columns play the category and value roles for a
chart, given a partial ChartConfig. Each role falls back in order:

    1. the explicit config field
    2. the first column whose first-row value has the expected scalar kind
       (str for categorical roles, number for numeric roles)
    3. a positional default (the first column) for categorical roles

Resolution never raises: a role that cannot be filled stays None and the
renderer coerces the missing cells to 0 / ''.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from canvas_charts.core.formatting import is_numeric, to_number
from canvas_charts.schemas import ChartConfig, ChartType
from canvas_charts.schemas.columns import ColumnNames

logger = logging.getLogger(__name__)

Row = dict[str, Any]


@dataclass(frozen=True)
class ResolvedColumns:
    """Concrete column names for each visual role of one chart.

    Attributes:
        category: Categorical axis (x labels, pie categories, funnel stages).
        value: Numeric axis.
        cluster: Inner grouping key for clustered bars.
        cumulative: Cumulative-percentage column for Pareto charts.
    """

    category: str | None = None
    value: str | None = None
    cluster: str | None = None
    cumulative: str | None = None


def first_column(rows: Sequence[Row]) -> str | None:
    """Positional default: the first key of the first row."""
    if not rows:
        return None
    return next(iter(rows[0]), None)


def first_string_column(rows: Sequence[Row]) -> str | None:
    """First column whose first-row value is a string."""
    if not rows:
        return None
    return next((k for k, v in rows[0].items() if isinstance(v, str)), None)


def first_numeric_column(
    rows: Sequence[Row], exclude: str | None = None
) -> str | None:
    """First column whose first-row value is a number."""
    if not rows:
        return None
    return next(
        (k for k, v in rows[0].items() if k != exclude and is_numeric(v)),
        None,
    )


def is_all_zero(rows: Sequence[Row], column: str | None) -> bool:
    """True when every cell of a column coerces to 0."""
    return all(to_number(row.get(column)) == 0 for row in rows)


def first_nonzero_column(rows: Sequence[Row], exclude: str | None) -> str | None:
    """First column (other than `exclude`) holding any non-zero numeric cell."""
    if not rows:
        return None
    for key in rows[0]:
        if key == exclude:
            continue
        if any(to_number(row.get(key)) != 0 for row in rows):
            return key
    return None


class ColumnResolver:
    """Infers column roles for one render request.

    Attributes:
        rows: Dataset rows (read-only).
        config: Column-role configuration.
        chart_type: Chart kind being drawn.
    """

    def __init__(
        self,
        rows: Sequence[Row],
        config: ChartConfig | dict | None,
        chart_type: ChartType | str,
    ) -> None:
        self.rows = rows
        self.config = ChartConfig.coerce(config)
        self.chart_type = ChartType.parse(chart_type)

    def resolve(self) -> ResolvedColumns:
        """Resolve every role the chart type needs."""
        if not self.rows:
            return ResolvedColumns()

        handler = {
            ChartType.HORIZONTAL_BAR: self._horizontal_bar,
            ChartType.PARETO: self._pareto,
            ChartType.PIE: self._pie,
            ChartType.CLUSTERED_BAR: self._clustered_bar,
            ChartType.FUNNEL: self._funnel,
        }.get(self.chart_type, self._axis)
        columns = handler()
        logger.debug(f"Resolved columns for {self.chart_type.value}: {columns}")
        return columns

    # ------------------------------------------------------------------
    # Generic x/y axis charts (vertical bar, line, area)
    # ------------------------------------------------------------------

    def category_fallback(self) -> str | None:
        """First string column, else the first key."""
        return first_string_column(self.rows) or first_column(self.rows)

    def x_column(self) -> str | None:
        return self.config.x_axis_col_name or self.category_fallback()

    def y_column(self) -> str | None:
        return self.config.y_axis_column or first_numeric_column(self.rows)

    def _axis(self) -> ResolvedColumns:
        return ResolvedColumns(category=self.x_column(), value=self.y_column())

    # ------------------------------------------------------------------
    # Per-chart-type rules
    # ------------------------------------------------------------------

    def _horizontal_bar(self) -> ResolvedColumns:
        # Horizontal bars swap axes: the y column labels the bars and the
        # x column holds the bar length.
        label = self.config.y_axis_column or self.category_fallback()
        value = self.config.x_axis_col_name or first_numeric_column(
            self.rows, exclude=label
        )

        if is_all_zero(self.rows, value):
            replacement = first_nonzero_column(self.rows, exclude=label)
            if replacement is not None and replacement != value:
                logger.debug(
                    f"Value column {value!r} is empty, using {replacement!r} instead"
                )
                value = replacement
        return ResolvedColumns(category=label, value=value)

    def _pareto(self) -> ResolvedColumns:
        cumulative = self.config.cumulative_line or ColumnNames.CUMULATIVE_PCT
        value = (
            self.config.y_axis_column
            or self.config.value_col_name
            or first_numeric_column(self.rows, exclude=cumulative)
            or "value"
        )
        return ResolvedColumns(
            category=self.x_column(), value=value, cumulative=cumulative
        )

    def _pie(self) -> ResolvedColumns:
        return ResolvedColumns(
            category=self.config.category_col_name or self.category_fallback(),
            value=self.config.value_col_name or first_numeric_column(self.rows),
        )

    def _clustered_bar(self) -> ResolvedColumns:
        return ResolvedColumns(
            category=self.x_column(),
            value=self.y_column(),
            cluster=self.config.cluster_by or ColumnNames.CLUSTER,
        )

    def _funnel(self) -> ResolvedColumns:
        return ResolvedColumns(
            category=self.config.stages_col_name or self.category_fallback(),
            value=self.config.value_col_name or first_numeric_column(self.rows),
        )


def resolve_columns(
    rows: Sequence[Row],
    config: ChartConfig | dict | None,
    chart_type: ChartType | str,
) -> ResolvedColumns:
    """Convenience wrapper around ColumnResolver."""
    return ColumnResolver(rows, config, chart_type).resolve()
