"""Drawing surfaces the renderers can target."""

from canvas_charts.surfaces.base import DrawingSurface
from canvas_charts.surfaces.recording import DrawCall, RecordingSurface

__all__ = ["DrawingSurface", "DrawCall", "RecordingSurface"]
