"""Test data factories for generating datasets and schema objects."""

from typing import Any

from canvas_charts.core.columns import ResolvedColumns
from canvas_charts.core.scale import PlotRect, padding_for
from canvas_charts.renderers.base import RenderContext
from canvas_charts.schemas import ChartType, EngineSettings, HitTestElement
from canvas_charts.schemas.chart_type import ElementKind
from canvas_charts.surfaces import RecordingSurface


def create_rows(n: int = 5, label_col: str = "vendor", value_col: str = "spend") -> list[dict]:
    """Create n rows of (label, value) with increasing values."""
    return [{label_col: f"Item {i}", value_col: (i + 1) * 100} for i in range(n)]


def create_forecast_rows() -> list[dict]:
    """Six months of cash outflow forecast, CURRENT in the fourth month."""
    statuses = ["ACTUAL", "ACTUAL", "ACTUAL", "CURRENT", "PROJECTED", "PROJECTED"]
    months = ["Jan 2025", "Feb 2025", "Mar 2025", "Apr 2025", "May 2025", "Jun 2025"]
    rows = []
    for i, (month, status) in enumerate(zip(months, statuses)):
        actual = 1_000_000 * min(i + 1, 4)
        projected = 0 if status == "ACTUAL" else 500_000 * (i - 2)
        rows.append(
            {
                "date_label": month,
                "cumulative_actual_usd": actual,
                "cumulative_projected_usd": projected,
                "cumulative_budget_usd": 1_200_000 * (i + 1),
                "period_status": status,
            }
        )
    return rows


def create_element(kind: str = "bar", **kwargs: Any) -> HitTestElement:
    """Create a HitTestElement with overrideable geometry."""
    defaults = {"x": 0.0, "y": 0.0, "width": 0.0, "height": 0.0, "label": "A"}
    data = {**defaults, **kwargs}
    return HitTestElement(kind=ElementKind(kind), **data)


def create_context(
    rows: list[dict],
    columns: ResolvedColumns,
    chart_type: ChartType = ChartType.VERTICAL_BAR,
    width: float = 600,
    height: float = 270,
    settings: EngineSettings | None = None,
) -> RenderContext:
    """Create a RenderContext drawing onto a fresh RecordingSurface."""
    surface = RecordingSurface(width, height)
    return RenderContext(
        surface=surface,
        rows=rows,
        columns=columns,
        plot=PlotRect.from_canvas(width, height, padding_for(False)),
        settings=settings or EngineSettings(),
        chart_type=chart_type,
    )
