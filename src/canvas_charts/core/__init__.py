"""Core chart math: formatting, column inference, scales and hit-testing."""

from canvas_charts.core.columns import ColumnResolver, ResolvedColumns, resolve_columns
from canvas_charts.core.formatting import (
    format_currency,
    format_percent,
    format_value,
    to_number,
    truncate_label,
)
from canvas_charts.core.hit_test import locate, tooltip_for
from canvas_charts.core.scale import LinearScale, Padding, PlotRect, value_axis_max

__all__ = [
    "ColumnResolver",
    "ResolvedColumns",
    "resolve_columns",
    "format_value",
    "format_currency",
    "format_percent",
    "to_number",
    "truncate_label",
    "locate",
    "tooltip_for",
    "LinearScale",
    "Padding",
    "PlotRect",
    "value_axis_max",
]
