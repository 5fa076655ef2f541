"""Base utilities and types for chart renderers."""

import math
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from canvas_charts.constants import COLOR_GRID, COLOR_TEXT_FAINT
from canvas_charts.core.columns import ResolvedColumns
from canvas_charts.core.formatting import format_value, to_label, to_number
from canvas_charts.core.scale import LinearScale, PlotRect
from canvas_charts.schemas import ChartType, EngineSettings, HitTestElement
from canvas_charts.surfaces.base import DrawingSurface

Row = dict[str, Any]


@dataclass(frozen=True)
class RenderContext:
    """Everything a renderer needs for one draw.

    Attributes:
        surface: Target drawing surface.
        rows: Rows to draw (already truncated).
        columns: Resolved column roles.
        plot: Plot rectangle from the base padding profile.
        settings: Styling and interaction settings.
        chart_type: The chart kind requested (after parsing).
    """

    surface: DrawingSurface
    rows: Sequence[Row]
    columns: ResolvedColumns
    plot: PlotRect
    settings: EngineSettings
    chart_type: ChartType


class ChartRenderer(Protocol):
    """Protocol every chart strategy implements."""

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        """Issue the draw calls and return hit-test elements in draw order."""
        ...


# ---------------------------------------------------------------------------
# Column extraction
# ---------------------------------------------------------------------------


def column_values(
    rows: Sequence[Row], column: str | None, aliases: Sequence[str] = ()
) -> list[float]:
    """Numeric cells of a column, trying per-row aliases when a cell is empty."""
    values = []
    for row in rows:
        value = to_number(row.get(column)) if column is not None else 0.0
        for alias in aliases:
            if value:
                break
            value = to_number(row.get(alias))
        values.append(value)
    return values


def column_labels(
    rows: Sequence[Row], column: str | None, aliases: Sequence[str] = ()
) -> list[str]:
    """Label cells of a column, trying per-row aliases when a cell is empty."""
    labels = []
    for row in rows:
        label = to_label(row.get(column)) if column is not None else ""
        for alias in aliases:
            if label:
                break
            label = to_label(row.get(alias))
        labels.append(label)
    return labels


# ---------------------------------------------------------------------------
# Shared drawing helpers
# ---------------------------------------------------------------------------


def draw_value_gridlines(
    ctx: RenderContext, scale: LinearScale, intervals: int | None = None
) -> None:
    """Horizontal gridlines with value labels left of the plot."""
    surface, plot, settings = ctx.surface, ctx.plot, ctx.settings
    intervals = intervals or settings.grid_intervals
    surface.stroke_style = COLOR_GRID
    surface.line_width = settings.grid_line_width
    for value, y in reversed(scale.ticks(intervals)):
        surface.begin_path()
        surface.move_to(plot.left, y)
        surface.line_to(plot.right, y)
        surface.stroke()

        surface.fill_style = COLOR_TEXT_FAINT
        surface.font = settings.font(9)
        surface.text_align = "right"
        surface.fill_text(format_value(value), plot.left - 8, y + 3)


def draw_round_rect(
    surface: DrawingSurface,
    x: float,
    y: float,
    width: float,
    height: float,
    radii: Sequence[float],
    color: str,
) -> None:
    """Fill a rounded rectangle in one go."""
    surface.fill_style = color
    surface.begin_path()
    surface.round_rect(x, y, width, height, radii)
    surface.fill()


def draw_rotated_label(
    surface: DrawingSurface, text: str, x: float, y: float, angle: float
) -> None:
    """Right-aligned label rotated around its anchor point."""
    surface.save()
    surface.translate(x, y)
    surface.rotate(angle)
    surface.text_align = "right"
    surface.fill_text(text, 0, 0)
    surface.restore()


def draw_dot(
    surface: DrawingSurface, x: float, y: float, radius: float, color: str
) -> None:
    surface.fill_style = color
    surface.begin_path()
    surface.arc(x, y, radius, 0, 2 * math.pi)
    surface.fill()
