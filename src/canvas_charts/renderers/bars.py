"""Horizontal and vertical bar chart renderers."""

import math

from canvas_charts.constants import (
    COLOR_GRID,
    COLOR_TEXT_AXIS,
    COLOR_TEXT_FAINT,
    COLOR_TEXT_LABEL,
    COLOR_TEXT_MUTED,
)
from canvas_charts.core.formatting import (
    format_value,
    truncate_label,
    vertical_label_budget,
)
from canvas_charts.core.scale import (
    BandLayout,
    LinearScale,
    fit_label_padding,
    label_step,
    value_axis_max,
)
from canvas_charts.renderers.base import (
    RenderContext,
    column_labels,
    column_values,
    draw_rotated_label,
    draw_round_rect,
    draw_value_gridlines,
)
from canvas_charts.schemas import ElementKind, HitTestElement
from canvas_charts.schemas.columns import LABEL_ALIASES, VALUE_ALIASES

VERTICAL_BAR_RATIO = 0.65
LABEL_ROTATION = -math.pi / 6


class HorizontalBarRenderer:
    """Bars growing right from the left edge, one row per category.

    The left padding widens to fit the longest label; bar thickness is
    75% of the per-row slot, clamped to [12, 22] px.
    """

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, settings = ctx.surface, ctx.settings
        labels = column_labels(ctx.rows, ctx.columns.category)
        values = column_values(ctx.rows, ctx.columns.value)
        max_value = value_axis_max(values)

        padding = fit_label_padding(
            ctx.plot.padding,
            surface,
            labels,
            settings.font(10),
            settings.horizontal_label_chars,
        )
        plot = ctx.plot.with_padding(padding)
        scale = LinearScale.horizontal(max_value, plot.left, plot.right)

        n = len(values)
        bar_h = max(12.0, min(22.0, plot.height / n * 0.75))
        gap = (plot.height - bar_h * n) / (n + 1)

        # Vertical gridlines with value ticks under the plot
        surface.stroke_style = COLOR_GRID
        surface.line_width = settings.grid_line_width
        for value, x in scale.ticks(settings.grid_intervals):
            surface.begin_path()
            surface.move_to(x, plot.top)
            surface.line_to(x, plot.bottom)
            surface.stroke()

            surface.fill_style = COLOR_TEXT_FAINT
            surface.font = settings.font(9)
            surface.text_align = "center"
            surface.fill_text(format_value(value), x, plot.bottom + 14)

        elements = []
        for i, value in enumerate(values):
            y = plot.top + gap + i * (bar_h + gap)
            bar_w = value / max_value * plot.width
            # Zero bars keep a 1px sliver so the row is still visible
            draw_round_rect(
                surface,
                plot.left,
                y,
                max(1.0, bar_w),
                bar_h,
                [0, 3, 3, 0],
                settings.color_for(i),
            )

            surface.fill_style = COLOR_TEXT_LABEL
            surface.font = settings.font(10)
            surface.text_align = "right"
            surface.fill_text(
                truncate_label(labels[i], settings.horizontal_label_chars),
                plot.left - 8,
                y + bar_h / 2 + 3,
            )

            formatted = format_value(value)
            surface.fill_style = COLOR_TEXT_MUTED
            surface.text_align = "left"
            surface.fill_text(formatted, plot.left + max(1.0, bar_w) + 5, y + bar_h / 2 + 3)

            elements.append(
                HitTestElement(
                    kind=ElementKind.BAR,
                    x=plot.left,
                    y=y,
                    width=bar_w,
                    height=bar_h,
                    label=labels[i],
                    formatted_value=formatted,
                )
            )
        return elements


class VerticalBarRenderer:
    """Bars rising from the baseline with rotated category labels.

    Also used for stacked bar requests and as the fallback for unknown
    chart types.
    """

    value_aliases = VALUE_ALIASES["vertical_bar_chart"]
    label_aliases = LABEL_ALIASES["vertical_bar_chart"]

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, plot, settings = ctx.surface, ctx.plot, ctx.settings
        values = column_values(ctx.rows, ctx.columns.value, self.value_aliases)
        labels = column_labels(ctx.rows, ctx.columns.category, self.label_aliases)
        max_value = value_axis_max(values)
        scale = LinearScale.vertical(max_value, plot)
        band = BandLayout.across(plot.left, plot.width, len(values), VERTICAL_BAR_RATIO)
        step = label_step(len(values))

        draw_value_gridlines(ctx, scale)

        elements = []
        for i, value in enumerate(values):
            x = band.offset(i)
            bar_h = value / max_value * plot.height
            top = plot.bottom - bar_h
            draw_round_rect(
                surface, x, top, band.bar_width, bar_h, [3, 3, 0, 0], settings.color_for(i)
            )

            formatted = format_value(value)
            if value > 0 and (i % step == 0 or i == len(values) - 1):
                surface.fill_style = COLOR_TEXT_AXIS
                surface.font = settings.font(9)
                surface.text_align = "center"
                surface.fill_text(formatted, x + band.bar_width / 2, top - 4)

            elements.append(
                HitTestElement(
                    kind=ElementKind.BAR,
                    x=x,
                    y=top,
                    width=band.bar_width,
                    height=bar_h,
                    label=labels[i],
                    formatted_value=formatted,
                )
            )

        surface.fill_style = COLOR_TEXT_AXIS
        surface.font = settings.font(9)
        budget = vertical_label_budget(band.slot, settings.vertical_min_label_chars)
        for i, label in enumerate(labels):
            if i % step != 0 and i != len(labels) - 1:
                continue
            draw_rotated_label(
                surface,
                truncate_label(label, budget),
                band.center(i),
                plot.bottom + 10,
                LABEL_ROTATION,
            )
        return elements
