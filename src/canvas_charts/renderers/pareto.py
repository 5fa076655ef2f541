"""Pareto chart renderer: value bars plus a cumulative-percentage line.

Bars use the primary value axis (left). The cumulative line uses a fixed
0-100% secondary axis (right) regardless of the data, and is only drawn
when at least one cumulative value is positive.
"""

import math

from canvas_charts.constants import COLOR_CUMULATIVE, COLOR_TEXT_MUTED
from canvas_charts.core.formatting import format_value, to_fixed, truncate_label
from canvas_charts.core.scale import (
    CUMULATIVE_DOMAIN,
    BandLayout,
    LinearScale,
    label_step,
    value_axis_max,
)
from canvas_charts.renderers.base import (
    RenderContext,
    column_labels,
    column_values,
    draw_dot,
    draw_rotated_label,
    draw_value_gridlines,
)
from canvas_charts.schemas import ElementKind, HitTestElement
from canvas_charts.schemas.columns import CUMULATIVE_ALIASES, LABEL_ALIASES, VALUE_ALIASES

PARETO_BAR_RATIO = 0.7
LABEL_ROTATION = -math.pi / 4


class ParetoRenderer:
    """Dual-axis bar + cumulative line chart."""

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, plot, settings = ctx.surface, ctx.plot, ctx.settings
        values = column_values(ctx.rows, ctx.columns.value, VALUE_ALIASES["pareto_chart"])
        labels = column_labels(ctx.rows, ctx.columns.category, LABEL_ALIASES["pareto_chart"])
        cumulatives = column_values(ctx.rows, ctx.columns.cumulative, CUMULATIVE_ALIASES)

        scale = LinearScale.vertical(value_axis_max(values), plot)
        cumulative_scale = LinearScale.vertical(
            CUMULATIVE_DOMAIN[1], plot, domain_min=CUMULATIVE_DOMAIN[0]
        )
        band = BandLayout.across(plot.left, plot.width, len(values), PARETO_BAR_RATIO)

        draw_value_gridlines(ctx, scale)

        elements = []
        for i, value in enumerate(values):
            x = band.offset(i)
            top = scale(value)
            surface.fill_style = settings.color_for(i)
            surface.fill_rect(x, top, band.bar_width, plot.bottom - top)
            elements.append(
                HitTestElement(
                    kind=ElementKind.BAR,
                    x=x,
                    y=top,
                    width=band.bar_width,
                    height=plot.bottom - top,
                    label=labels[i],
                    formatted_value=f"{format_value(value)} ({to_fixed(cumulatives[i], 1)}%)",
                )
            )

        if any(c > 0 for c in cumulatives):
            points = [(band.center(i), cumulative_scale(c)) for i, c in enumerate(cumulatives)]

            surface.stroke_style = COLOR_CUMULATIVE
            surface.line_width = 2
            surface.begin_path()
            for i, (x, y) in enumerate(points):
                if i == 0:
                    surface.move_to(x, y)
                else:
                    surface.line_to(x, y)
            surface.stroke()

            for i, (x, y) in enumerate(points):
                draw_dot(surface, x, y, 3, COLOR_CUMULATIVE)
                elements.append(
                    HitTestElement(
                        kind=ElementKind.POINT,
                        x=x,
                        y=y,
                        label=f"{labels[i]} (Cumulative)",
                        formatted_value=f"{to_fixed(cumulatives[i], 1)}%",
                    )
                )

            # Right-side percentage axis
            surface.fill_style = COLOR_CUMULATIVE
            surface.font = settings.font(8)
            surface.text_align = "left"
            for pct, y in cumulative_scale.ticks(4):
                surface.fill_text(f"{pct:.0f}%", plot.right + 5, y + 3)

        surface.fill_style = COLOR_TEXT_MUTED
        surface.font = settings.font(9)
        step = label_step(len(labels))
        for i, label in enumerate(labels):
            if i % step != 0 and i != len(labels) - 1:
                continue
            draw_rotated_label(
                surface,
                truncate_label(label, settings.pareto_label_chars),
                band.center(i),
                plot.bottom + 12,
                LABEL_ROTATION,
            )
        return elements
