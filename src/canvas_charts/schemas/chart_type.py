"""Chart type and hit-test element kind enumerations."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ChartType(str, Enum):
    """Closed set of chart kinds the engine can draw."""

    HORIZONTAL_BAR = "horizontal_bar_chart"
    VERTICAL_BAR = "vertical_bar_chart"
    STACKED_BAR = "stacked_bar_chart"
    LINE = "line_chart"
    AREA = "area_chart"
    PARETO = "pareto_chart"
    PIE = "pie_chart"
    CLUSTERED_BAR = "clustered_bar_chart"
    FUNNEL = "funnel_chart"

    @classmethod
    def parse(cls, tag: "str | ChartType | None") -> "ChartType":
        """Map a loosely-typed tag onto a ChartType.

        Unknown or missing tags fall back to VERTICAL_BAR.
        """
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            logger.warning(f"Unknown chart type {tag!r}, drawing vertical bars")
            return cls.VERTICAL_BAR


class ElementKind(str, Enum):
    """Shape family of a hit-test element."""

    POINT = "point"
    BAR = "bar"
    SLICE = "slice"
