"""Canvas Charts.

A charting engine that turns tabular rows plus a loose column-role config
into drawing calls on a 2D surface, with pointer hit-testing for tooltips.

Typical use:

    from canvas_charts import ChartController, RecordingSurface

    chart = ChartController(RecordingSurface(600, 270))
    chart.render(rows, {"x_axis_col_name": "vendor"}, "horizontal_bar_chart")
    tooltip = chart.pointer_move(120, 48)
"""

from canvas_charts.schemas import (
    CanvasSize,
    ChartConfig,
    ChartType,
    EngineSettings,
    HitTestElement,
    RenderResult,
    TooltipState,
)
from canvas_charts.services import ChartController, configure_logging, render_chart
from canvas_charts.surfaces import DrawingSurface, RecordingSurface

__version__ = "0.1.0"

__all__ = [
    "CanvasSize",
    "ChartConfig",
    "ChartType",
    "EngineSettings",
    "HitTestElement",
    "RenderResult",
    "TooltipState",
    "ChartController",
    "configure_logging",
    "render_chart",
    "DrawingSurface",
    "RecordingSurface",
]
