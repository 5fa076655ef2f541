"""Chart type -> renderer dispatch table."""

from canvas_charts.renderers.bars import HorizontalBarRenderer, VerticalBarRenderer
from canvas_charts.renderers.base import ChartRenderer
from canvas_charts.renderers.clustered import ClusteredBarRenderer
from canvas_charts.renderers.funnel import FunnelRenderer
from canvas_charts.renderers.line import LineRenderer
from canvas_charts.renderers.pareto import ParetoRenderer
from canvas_charts.renderers.pie import PieRenderer
from canvas_charts.schemas import ChartType

RENDERERS: dict[ChartType, ChartRenderer] = {
    ChartType.HORIZONTAL_BAR: HorizontalBarRenderer(),
    ChartType.VERTICAL_BAR: VerticalBarRenderer(),
    # Stacked bars are drawn as plain vertical bars
    ChartType.STACKED_BAR: VerticalBarRenderer(),
    ChartType.LINE: LineRenderer(),
    ChartType.AREA: LineRenderer(filled=True),
    ChartType.PARETO: ParetoRenderer(),
    ChartType.PIE: PieRenderer(),
    ChartType.CLUSTERED_BAR: ClusteredBarRenderer(),
    ChartType.FUNNEL: FunnelRenderer(),
}


def get_renderer(chart_type: ChartType) -> ChartRenderer:
    """Renderer for a chart type; vertical bars for anything unregistered."""
    return RENDERERS.get(chart_type, RENDERERS[ChartType.VERTICAL_BAR])
