"""One-shot chart rendering.

`render_chart` runs the whole pipeline for one draw:

    normalize -> truncate -> size canvas -> clear -> title
      -> resolve columns -> dispatch renderer -> truncation indicator

It never raises for bad data: empty datasets draw nothing, unknown chart
types fall back to vertical bars and malformed cells read as 0.
"""

import logging
from typing import Any, Sequence

import pandas as pd

from canvas_charts.constants import COLOR_TEXT_FAINT, COLOR_TEXT_STRONG
from canvas_charts.core.columns import resolve_columns
from canvas_charts.core.scale import PlotRect, padding_for
from canvas_charts.renderers import RenderContext, get_renderer
from canvas_charts.schemas import (
    CanvasSize,
    ChartConfig,
    ChartType,
    EngineSettings,
    RenderResult,
)
from canvas_charts.services.data_prep import (
    calculate_canvas_height,
    normalize_dataset,
    prepare_data,
)
from canvas_charts.surfaces.base import DrawingSurface

logger = logging.getLogger(__name__)

TITLE_BASELINE = 14


def draw_title(surface: DrawingSurface, title: str, settings: EngineSettings) -> None:
    surface.fill_style = COLOR_TEXT_STRONG
    surface.font = settings.font(11, "bold")
    surface.text_align = "center"
    surface.fill_text(title, surface.width / 2, TITLE_BASELINE)


def draw_truncation_notice(
    surface: DrawingSurface, shown: int, total: int, settings: EngineSettings
) -> None:
    surface.fill_style = COLOR_TEXT_FAINT
    surface.font = settings.font(9, "italic")
    surface.text_align = "right"
    surface.fill_text(f"Showing {shown} of {total}", surface.width - 10, surface.height - 5)


def render_chart(
    surface: DrawingSurface,
    dataset: "Sequence[dict[str, Any]] | pd.DataFrame | None",
    chart_config: ChartConfig | dict | None = None,
    chart_type: ChartType | str | None = ChartType.VERTICAL_BAR,
    title: str | None = None,
    canvas_size: CanvasSize | None = None,
    settings: EngineSettings | None = None,
) -> RenderResult:
    """Draw one chart onto `surface`.

    Args:
        surface: Target drawing surface. Resized when the canvas size changes.
        dataset: Rows as dicts, or a DataFrame.
        chart_config: Column roles; missing roles are inferred.
        chart_type: Chart kind tag. Unknown tags draw vertical bars.
        title: Optional title drawn above the plot. Defaults to the config title.
        canvas_size: Fixed canvas size. When omitted the surface keeps its
            width and the height follows the number of drawn rows.
        settings: Styling and interaction settings.

    Returns:
        RenderResult with the hit-test elements in draw order.
    """
    settings = settings or EngineSettings()
    config = ChartConfig.coerce(chart_config)
    chart_type = ChartType.parse(chart_type)
    title = title if title is not None else config.title
    rows = normalize_dataset(dataset)

    if not rows:
        logger.debug("Empty dataset, nothing to draw")
        return RenderResult(
            chart_type=chart_type.value,
            canvas_width=surface.width,
            canvas_height=surface.height,
        )

    prepared = prepare_data(rows, chart_type, config, settings)

    if canvas_size is None:
        canvas_size = CanvasSize(
            width=surface.width,
            height=calculate_canvas_height(len(prepared.rows), chart_type, bool(title)),
        )
    if (canvas_size.width, canvas_size.height) != (surface.width, surface.height):
        surface.resize(canvas_size.width, canvas_size.height)
    surface.clear()

    if title:
        draw_title(surface, title, settings)

    columns = resolve_columns(prepared.rows, config, chart_type)
    ctx = RenderContext(
        surface=surface,
        rows=prepared.rows,
        columns=columns,
        plot=PlotRect.from_canvas(surface.width, surface.height, padding_for(bool(title))),
        settings=settings,
        chart_type=chart_type,
    )
    elements = get_renderer(chart_type).draw(ctx)

    if prepared.is_truncated:
        draw_truncation_notice(surface, len(prepared.rows), prepared.total_count, settings)

    logger.info(
        f"Rendered {chart_type.value}: {len(prepared.rows)}/{prepared.total_count} rows, "
        f"{len(elements)} elements on {surface.width:.0f}x{surface.height:.0f}"
    )
    return RenderResult(
        chart_type=chart_type.value,
        elements=elements,
        drawn_count=len(prepared.rows),
        total_count=prepared.total_count,
        is_truncated=prepared.is_truncated,
        canvas_width=surface.width,
        canvas_height=surface.height,
    )
