"""Clustered (grouped) bar chart renderer."""

from typing import Sequence

from canvas_charts.constants import COLOR_TEXT_AXIS
from canvas_charts.core.formatting import format_value, to_label, to_number
from canvas_charts.core.scale import ClusterLayout, LinearScale, value_axis_max
from canvas_charts.renderers.base import RenderContext, Row, draw_value_gridlines
from canvas_charts.schemas import ElementKind, HitTestElement

UNKNOWN_CATEGORY = "Unknown"
DEFAULT_CLUSTER = "Default"


def group_clusters(
    rows: Sequence[Row],
    category_col: str | None,
    cluster_col: str | None,
    value_col: str | None,
) -> tuple[list[str], list[str], dict[tuple[str, str], float]]:
    """Pivot rows into (categories, clusters, {(category, cluster): value}).

    Both key lists keep first-seen order. Repeated (category, cluster)
    pairs keep the last value; missing combinations read as 0.
    """
    categories: list[str] = []
    clusters: list[str] = []
    values: dict[tuple[str, str], float] = {}
    for row in rows:
        category = to_label(row.get(category_col)) or UNKNOWN_CATEGORY
        cluster = to_label(row.get(cluster_col)) or DEFAULT_CLUSTER
        if category not in categories:
            categories.append(category)
        if cluster not in clusters:
            clusters.append(cluster)
        values[(category, cluster)] = to_number(row.get(value_col))
    return categories, clusters, values


class ClusteredBarRenderer:
    """One bar per (category, cluster), colored by cluster."""

    def draw(self, ctx: RenderContext) -> list[HitTestElement]:
        surface, plot, settings = ctx.surface, ctx.plot, ctx.settings
        categories, clusters, grouped = group_clusters(
            ctx.rows, ctx.columns.category, ctx.columns.cluster, ctx.columns.value
        )
        scale = LinearScale.vertical(value_axis_max(grouped.values()), plot)
        layout = ClusterLayout.across(plot.left, plot.width, len(categories), len(clusters))

        draw_value_gridlines(ctx, scale)

        elements = []
        for ci, category in enumerate(categories):
            for ki, cluster in enumerate(clusters):
                value = grouped.get((category, cluster), 0.0)
                x = layout.offset(ci, ki)
                top = scale(value)
                surface.fill_style = settings.color_for(ki)
                surface.fill_rect(x, top, layout.cluster_width, plot.bottom - top)
                elements.append(
                    HitTestElement(
                        kind=ElementKind.BAR,
                        x=x,
                        y=top,
                        width=layout.cluster_width,
                        height=plot.bottom - top,
                        label=f"{category} - {cluster}",
                        formatted_value=format_value(value),
                    )
                )

        surface.fill_style = COLOR_TEXT_AXIS
        surface.font = settings.font(9)
        surface.text_align = "center"
        for ci, category in enumerate(categories):
            surface.fill_text(
                category[: settings.cluster_label_chars],
                layout.center(ci),
                plot.bottom + 15,
            )
        return elements
