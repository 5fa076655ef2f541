"""Dataset normalization, truncation and canvas sizing.

Pure functions run before any drawing: large datasets are cut down to a
readable number of rows per chart type, pie charts fold their tail into a
single "Others" slice, and the canvas height is derived from the row count
when the host does not fix it.
"""

import logging
from typing import Any, Sequence

import pandas as pd

from canvas_charts.core.columns import first_column, first_numeric_column, first_string_column
from canvas_charts.core.formatting import to_number
from canvas_charts.schemas import ChartConfig, ChartType, EngineSettings, PreparedData
from canvas_charts.schemas.defaults import DEFAULT_CANVAS_HEIGHT

logger = logging.getLogger(__name__)

Row = dict[str, Any]


def normalize_dataset(dataset: "Sequence[Row] | pd.DataFrame | None") -> list[Row]:
    """Return the dataset as a list of row dicts.

    DataFrames are converted row by row (`orient="records"`); missing cells
    (NaN/NaT) become None so they coerce like any other empty cell.
    """
    if dataset is None:
        return []
    if isinstance(dataset, pd.DataFrame):
        frame = dataset.astype(object).where(pd.notna(dataset), None)
        return frame.to_dict(orient="records")
    return [dict(row) for row in dataset]


def prepare_chart_data(
    dataset: Sequence[Row],
    chart_type: ChartType | str,
    settings: EngineSettings | None = None,
) -> PreparedData:
    """Keep the first N rows, N depending on the chart type."""
    rows = list(dataset)
    settings = settings or EngineSettings()
    total = len(rows)
    limit = settings.max_items_for(ChartType.parse(chart_type))
    if total <= limit:
        return PreparedData(rows=rows, total_count=total, is_truncated=False)

    logger.debug(f"Truncating {total} rows to {limit} for {chart_type}")
    return PreparedData(rows=rows[:limit], total_count=total, is_truncated=True)


def prepare_pie_data(
    dataset: Sequence[Row],
    config: ChartConfig | dict | None = None,
    settings: EngineSettings | None = None,
) -> PreparedData:
    """Fold slices beyond the limit into one "Others (n)" slice.

    With the default limit of 8, the first 7 rows are kept and the rest are
    summed into an eighth row. The folded row copies the first remaining
    row so it keeps every column.
    """
    rows = list(dataset)
    settings = settings or EngineSettings()
    limit = settings.pie_max_slices
    if len(rows) <= limit:
        return PreparedData(rows=rows, total_count=len(rows), is_truncated=False)

    config = ChartConfig.coerce(config)
    value_col = config.value_col_name or first_numeric_column(rows)
    category_col = (
        config.category_col_name or first_string_column(rows) or first_column(rows)
    )

    kept, rest = rows[: limit - 1], rows[limit - 1 :]
    others = dict(rest[0])
    others[category_col] = f"Others ({len(rest)})"
    others[value_col] = sum(to_number(row.get(value_col)) for row in rest)

    logger.debug(f"Folded {len(rest)} pie slices into {others[category_col]!r}")
    return PreparedData(rows=kept + [others], total_count=len(rows), is_truncated=True)


def prepare_data(
    dataset: Sequence[Row],
    chart_type: ChartType | str,
    config: ChartConfig | dict | None = None,
    settings: EngineSettings | None = None,
) -> PreparedData:
    """Dispatch to the pie or generic preparation."""
    if ChartType.parse(chart_type) == ChartType.PIE:
        return prepare_pie_data(dataset, config, settings)
    return prepare_chart_data(dataset, chart_type, settings)


def calculate_canvas_height(
    count: int, chart_type: ChartType | str, has_title: bool
) -> float:
    """Canvas height that gives every drawn row enough room.

    Args:
        count: Number of rows actually drawn.
        chart_type: Chart kind.
        has_title: Whether a title line is drawn above the plot.

    Returns:
        Height in pixels.
    """
    chart_type = ChartType.parse(chart_type)
    if chart_type == ChartType.HORIZONTAL_BAR:
        needed = (25 if has_title else 12) + count * 28 + 60
        return max(270, min(600, needed))
    if chart_type in (
        ChartType.VERTICAL_BAR,
        ChartType.STACKED_BAR,
        ChartType.PARETO,
        ChartType.CLUSTERED_BAR,
    ):
        return 320 if count > 10 else 270
    if chart_type == ChartType.PIE:
        return max(270, min(400, count * 24 + 40))
    return DEFAULT_CANVAS_HEIGHT
