"""Line and area chart renderers."""

import re
from datetime import date

from canvas_charts.constants import COLOR_AREA_FILL, COLOR_TEXT_AXIS, COLOR_WHITE
from canvas_charts.core.formatting import format_value, truncate_label
from canvas_charts.core.scale import LinearScale, label_step, line_domain, point_x
from canvas_charts.renderers.base import (
    RenderContext,
    column_labels,
    column_values,
    draw_dot,
    draw_value_gridlines,
)
from canvas_charts.schemas import ElementKind, HitTestElement

ISO_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})")
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

DENSE_LINE = 30  # above this many points: thin line, no visible dots
SMALL_DOTS = 20  # above this many points: smaller dots
MAX_X_LABELS = 8


def short_date_label(text: str) -> str | None:
    """'2025-03-01' -> 'Mar 25'; None when text is not an ISO date prefix."""
    match = ISO_MONTH_RE.match(text)
    if not match:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    try:
        date(year, month, 1)
    except ValueError:
        return None
    return f"{MONTH_ABBR[month - 1]} {year % 100:02d}"


class LineRenderer:
    """Single-series line through evenly spaced points.

    Attributes:
        filled: Fill the area between the line and the baseline.
    """

    def __init__(self, filled: bool = False) -> None:
        self.filled = filled

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, plot, settings = ctx.surface, ctx.plot, ctx.settings
        values = column_values(ctx.rows, ctx.columns.value)
        labels = column_labels(ctx.rows, ctx.columns.category)
        n = len(values)
        low, high = line_domain(values)
        scale = LinearScale.vertical(high, plot, domain_min=low)
        color = settings.color_for(0)

        draw_value_gridlines(ctx, scale)

        points = [(point_x(i, n, plot), scale(v)) for i, v in enumerate(values)]

        if self.filled:
            surface.fill_style = COLOR_AREA_FILL
            surface.begin_path()
            surface.move_to(points[0][0], plot.bottom)
            for x, y in points:
                surface.line_to(x, y)
            surface.line_to(points[-1][0], plot.bottom)
            surface.close_path()
            surface.fill()

        surface.stroke_style = color
        surface.line_width = 1.5 if n > DENSE_LINE else 2.5
        surface.line_join = "round"
        surface.line_cap = "round"
        surface.begin_path()
        for i, (x, y) in enumerate(points):
            if i == 0:
                surface.move_to(x, y)
            else:
                surface.line_to(x, y)
        surface.stroke()

        # Dense series hide the dots but keep every hit point
        show_dots = n <= DENSE_LINE
        dot_radius = 2.5 if n > SMALL_DOTS else 3.5
        ring_radius = 3.5 if n > SMALL_DOTS else 5.0

        elements = []
        for i, (x, y) in enumerate(points):
            if show_dots:
                draw_dot(surface, x, y, ring_radius, COLOR_WHITE)
                draw_dot(surface, x, y, dot_radius, color)
            elements.append(
                HitTestElement(
                    kind=ElementKind.POINT,
                    x=x,
                    y=y,
                    label=labels[i],
                    formatted_value=format_value(values[i]),
                )
            )

        surface.fill_style = COLOR_TEXT_AXIS
        surface.font = settings.font(9)
        surface.text_align = "center"
        step = label_step(n, MAX_X_LABELS)
        for i, label in enumerate(labels):
            if i % step != 0 and i != n - 1:
                continue
            text = short_date_label(label) or truncate_label(
                label, settings.line_label_chars
            )
            surface.fill_text(text, points[i][0], plot.bottom + 14)
        return elements
