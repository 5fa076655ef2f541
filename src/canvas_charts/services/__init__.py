"""Services package for chart orchestration.

This package contains:
- engine.py: render_chart, the one-shot render pipeline
- controller.py: ChartController for interactive charts (hover, click, resize)
- data_prep.py: Dataset normalization, truncation and canvas sizing
- settings_manager.py: Theme file loading/saving
- logging_config.py: Package logger setup
"""

from canvas_charts.services.controller import ChartController
from canvas_charts.services.engine import render_chart
from canvas_charts.services.logging_config import configure_logging

__all__ = ["ChartController", "render_chart", "configure_logging"]
