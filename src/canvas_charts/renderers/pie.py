"""Pie chart renderer with a side legend."""

import math
from typing import Sequence

from canvas_charts.constants import COLOR_TEXT_LABEL, COLOR_TEXT_MUTED, COLOR_WHITE
from canvas_charts.core.formatting import format_value, to_fixed, truncate_label
from canvas_charts.renderers.base import RenderContext, column_labels, column_values, draw_dot
from canvas_charts.schemas import ElementKind, HitTestElement

LEGEND_WIDTH = 140.0
LEGEND_ROW = 22.0
RADIUS_RATIO = 0.35
START_ANGLE = -math.pi / 2
MIN_LABELLED_SPAN = 0.3  # radians; thinner slices get no percent label


def pie_slices(values: Sequence[float]) -> list[tuple[float, float]]:
    """Clockwise (start, end) angles from 12 o'clock, proportional to values.

    A zero total is treated as 1 so the angles stay finite.
    """
    total = sum(values) or 1.0
    slices = []
    angle = START_ANGLE
    for value in values:
        span = value / total * 2 * math.pi
        slices.append((angle, angle + span))
        angle += span
    return slices


class PieRenderer:
    """Pie in the space right of a fixed-width legend column."""

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, settings = ctx.surface, ctx.settings
        width, height = ctx.plot.canvas_width, ctx.plot.canvas_height
        values = column_values(ctx.rows, ctx.columns.value)
        labels = column_labels(ctx.rows, ctx.columns.category)
        total = sum(values) or 1.0

        cx = LEGEND_WIDTH + (width - LEGEND_WIDTH) / 2
        cy = height / 2
        radius = min(width - LEGEND_WIDTH, height) * RADIUS_RATIO

        elements = []
        for i, (start, end) in enumerate(pie_slices(values)):
            surface.fill_style = settings.color_for(i)
            surface.begin_path()
            surface.move_to(cx, cy)
            surface.arc(cx, cy, radius, start, end)
            surface.close_path()
            surface.fill()

            surface.stroke_style = COLOR_WHITE
            surface.line_width = 2
            surface.stroke()

            mid = (start + end) / 2
            pct = values[i] / total * 100
            if end - start > MIN_LABELLED_SPAN:
                surface.fill_style = COLOR_WHITE
                surface.font = settings.font(11, "bold")
                surface.text_align = "center"
                surface.fill_text(
                    f"{to_fixed(pct, 0)}%",
                    cx + math.cos(mid) * radius * 0.65,
                    cy + math.sin(mid) * radius * 0.65,
                )

            elements.append(
                HitTestElement(
                    kind=ElementKind.SLICE,
                    x=cx + math.cos(mid) * radius * 0.5,
                    y=cy + math.sin(mid) * radius * 0.5,
                    width=radius * 0.5,
                    height=radius * 0.5,
                    label=labels[i],
                    formatted_value=f"{format_value(values[i])} ({to_fixed(pct, 0)}%)",
                )
            )

        # Legend, vertically centred in the left column
        legend_top = max(15.0, (height - len(values) * LEGEND_ROW) / 2)
        surface.text_align = "left"
        for i, value in enumerate(values):
            y = legend_top + i * LEGEND_ROW
            draw_dot(surface, 15, y, 5, settings.color_for(i))

            surface.fill_style = COLOR_TEXT_LABEL
            surface.font = settings.font(10)
            surface.fill_text(truncate_label(labels[i], settings.pie_legend_chars), 25, y + 4)

            surface.fill_style = COLOR_TEXT_MUTED
            surface.font = settings.font(9)
            surface.fill_text(
                f"{format_value(value)} ({to_fixed(value / total * 100, 1)}%)", 25, y + 15
            )
        return elements
