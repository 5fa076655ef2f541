"""Schemas package.

- chart_type.py: ChartType / ElementKind enumerations
- config.py: Configuration models (ChartConfig, EngineSettings, CanvasSize)
- data.py: Render output models (HitTestElement, TooltipState, RenderResult)
- columns.py: Column name constants for the dashboard feeds
"""

from .chart_type import ChartType, ElementKind
from .config import CanvasSize, ChartConfig, EngineSettings
from .data import (
    HitTestElement,
    PreparedData,
    RenderResult,
    TooltipLine,
    TooltipState,
)

__all__ = [
    "ChartType",
    "ElementKind",
    "ChartConfig",
    "CanvasSize",
    "EngineSettings",
    "HitTestElement",
    "PreparedData",
    "RenderResult",
    "TooltipLine",
    "TooltipState",
]
