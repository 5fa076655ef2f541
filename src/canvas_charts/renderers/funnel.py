"""Funnel chart renderer."""

from canvas_charts.constants import COLOR_WHITE
from canvas_charts.core.formatting import format_value
from canvas_charts.core.scale import safe_denominator
from canvas_charts.renderers.base import RenderContext, column_labels, column_values
from canvas_charts.schemas import ElementKind, HitTestElement

STAGE_FILL_RATIO = 0.9
LAST_STAGE_TAPER = 0.8


class FunnelRenderer:
    """Stacked trapezoids, each as wide as its stage value.

    A stage's bottom edge matches the next stage's top edge; the last stage
    tapers to 80% of its own top width.
    """

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, plot, settings = ctx.surface, ctx.plot, ctx.settings
        stages = column_labels(ctx.rows, ctx.columns.category)
        values = column_values(ctx.rows, ctx.columns.value)
        max_value = safe_denominator(max(values, default=0.0))

        stage_h = plot.height / len(stages)
        center_x = plot.canvas_width / 2
        widths = [v / max_value * plot.width * STAGE_FILL_RATIO for v in values]

        elements = []
        for i, value in enumerate(values):
            top_w = widths[i]
            bottom_w = widths[i + 1] if i < len(widths) - 1 else top_w * LAST_STAGE_TAPER
            y = plot.top + i * stage_h

            surface.fill_style = settings.color_for(i)
            surface.begin_path()
            surface.move_to(center_x - top_w / 2, y)
            surface.line_to(center_x + top_w / 2, y)
            surface.line_to(center_x + bottom_w / 2, y + stage_h)
            surface.line_to(center_x - bottom_w / 2, y + stage_h)
            surface.close_path()
            surface.fill()

            formatted = format_value(value)
            surface.fill_style = COLOR_WHITE
            surface.font = settings.font(11, "bold")
            surface.text_align = "center"
            surface.fill_text(
                stages[i][: settings.funnel_label_chars], center_x, y + stage_h / 2
            )
            surface.font = settings.font(9)
            surface.fill_text(formatted, center_x, y + stage_h / 2 + 15)

            elements.append(
                HitTestElement(
                    kind=ElementKind.BAR,
                    x=center_x - top_w / 2,
                    y=y,
                    width=top_w,
                    height=stage_h,
                    label=stages[i],
                    formatted_value=formatted,
                )
            )
        return elements
