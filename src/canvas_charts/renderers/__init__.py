"""Chart renderers.

Each renderer draws one chart kind onto a DrawingSurface and returns the
hit-test elements it produced, in draw order.
"""

from .base import ChartRenderer, RenderContext
from .registry import RENDERERS, get_renderer

__all__ = ["ChartRenderer", "RenderContext", "RENDERERS", "get_renderer"]
