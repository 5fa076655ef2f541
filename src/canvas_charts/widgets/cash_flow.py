"""Cumulative cash outflow chart: actual vs projected vs budget.

Draws three cumulative series over the forecast months:

- budget: dashed slate line across every month
- actual: solid gold line (with a light fill) up to the CURRENT month
- projected: dashed blue line from the CURRENT month on, plotted as
  actual + projected

Hover picks the month nearest the pointer horizontally (within 30 px) and
shows a multi-line tooltip. Any chart type other than a line chart is drawn
by the generic engine with the same rows.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict

from canvas_charts.constants import (
    CASH_FLOW_ACTUAL_FILL,
    COLOR_GRID_SOFT,
    COLOR_TEXT_LABEL,
    COLOR_TEXT_MUTED,
    LINE_COLORS,
)
from canvas_charts.core.formatting import format_currency, to_fixed, to_label, to_number
from canvas_charts.core.hit_test import nearest_by_x
from canvas_charts.core.scale import LinearScale, Padding, PlotRect, point_x, safe_denominator
from canvas_charts.schemas import (
    CanvasSize,
    ChartConfig,
    ChartType,
    ElementKind,
    HitTestElement,
    RenderResult,
    TooltipLine,
    TooltipState,
)
from canvas_charts.schemas.columns import ColumnNames, PeriodStatus
from canvas_charts.services.controller import ChartController
from canvas_charts.services.data_prep import normalize_dataset
from canvas_charts.widgets.time_window import correct_month_labels, filter_time_window

logger = logging.getLogger(__name__)

CASH_FLOW_PADDING = Padding(top=20, right=20, bottom=40, left=80)
CASH_FLOW_GRID_INTERVALS = 5
TOOLTIP_TOP = 20.0

DEFAULT_CASH_FLOW_CONFIG = ChartConfig(
    x_axis_col_name=ColumnNames.DATE_LABEL,
    y_axis_col_name=[
        ColumnNames.CUMULATIVE_ACTUAL_USD,
        ColumnNames.CUMULATIVE_PROJECTED_USD,
        ColumnNames.CUMULATIVE_BUDGET_USD,
    ],
    title="Monthly Cash Outflows",
)


class CashFlowSummary(BaseModel):
    """Totals shown in the metrics bar above the chart."""

    total_actual_usd: float = 0.0
    total_projected_usd: float = 0.0
    total_budget_usd: float = 0.0
    variance_usd: float = 0.0
    variance_pct: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def variance_text(self) -> str:
        """Signed variance, e.g. '+$1.2M (+4.5%)'; over budget is positive."""
        sign = "+" if self.variance_usd > 0 else ""
        pct_sign = "+" if self.variance_pct > 0 else ""
        return (
            f"{sign}{format_currency(abs(self.variance_usd))} "
            f"({pct_sign}{to_fixed(self.variance_pct, 1)}%)"
        )


def summarize(rows: "Sequence[dict[str, Any]] | pd.DataFrame") -> CashFlowSummary:
    """Totals of the cumulative series and the variance against budget.

    The series are cumulative, so each total is the largest value of its
    column. Variance is (actual + projected) - budget.
    """
    frame = pd.DataFrame(normalize_dataset(rows))
    if frame.empty:
        return CashFlowSummary()

    def total(column: str) -> float:
        if column not in frame:
            return 0.0
        return float(frame[column].map(to_number).max())

    actual = total(ColumnNames.CUMULATIVE_ACTUAL_USD)
    projected = total(ColumnNames.CUMULATIVE_PROJECTED_USD)
    budget = total(ColumnNames.CUMULATIVE_BUDGET_USD)
    variance = actual + projected - budget
    return CashFlowSummary(
        total_actual_usd=actual,
        total_projected_usd=projected,
        total_budget_usd=budget,
        variance_usd=variance,
        variance_pct=variance / budget * 100 if budget else 0.0,
    )


@dataclass(frozen=True)
class CashFlowPoint:
    """One month of the forecast as drawn."""

    x: float
    label: str
    actual: float
    projected: float
    budget: float
    status: str


def x_label_step(count: int) -> int:
    if count > 15:
        return math.ceil(count / 10)
    return 2 if count > 6 else 1


class CashFlowChart(ChartController):
    """Controller for the cash outflow forecast widget.

    `render` accepts an optional time window (30d, 90d or ytd) and corrects
    month labels for year rollover before drawing.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.points: list[CashFlowPoint] = []

    def render(
        self,
        dataset: "Sequence[dict[str, Any]] | pd.DataFrame | None",
        chart_config: ChartConfig | dict | None = None,
        chart_type: ChartType | str | None = ChartType.LINE,
        title: str | None = None,
        canvas_size: CanvasSize | None = None,
        window: str | None = None,
        today: date | None = None,
    ) -> list[HitTestElement]:
        rows = normalize_dataset(dataset)
        if window is not None:
            # Filtering reads the raw labels and corrects them itself
            rows = filter_time_window(rows, window, today)
        rows = correct_month_labels(rows, today)
        return super().render(
            rows,
            chart_config if chart_config is not None else DEFAULT_CASH_FLOW_CONFIG,
            chart_type,
            title,
            canvas_size,
        )

    @property
    def is_line_mode(self) -> bool:
        return (
            self._last_inputs is not None
            and ChartType.parse(self._last_inputs["chart_type"]) == ChartType.LINE
        )

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _draw(self, canvas_size: CanvasSize | None) -> list[HitTestElement]:
        self.points = []
        if not self.is_line_mode:
            return super()._draw(canvas_size)

        rows = self._last_inputs["dataset"]
        if not rows:
            return self._publish(
                RenderResult(
                    chart_type=ChartType.LINE.value,
                    canvas_width=self.surface.width,
                    canvas_height=self.surface.height,
                )
            )

        self._fit_surface(canvas_size)
        elements = self._draw_series(rows)
        logger.info(f"Rendered cash flow chart: {len(rows)} months")
        return self._publish(
            RenderResult(
                chart_type=ChartType.LINE.value,
                elements=elements,
                drawn_count=len(rows),
                total_count=len(rows),
                canvas_width=self.surface.width,
                canvas_height=self.surface.height,
            )
        )

    def _draw_series(self, rows: list[dict[str, Any]]) -> list[HitTestElement]:
        surface, settings = self.surface, self.settings
        plot = PlotRect.from_canvas(surface.width, surface.height, CASH_FLOW_PADDING)
        n = len(rows)

        labels = [to_label(row.get(ColumnNames.DATE_LABEL)) for row in rows]
        actual = [to_number(row.get(ColumnNames.CUMULATIVE_ACTUAL_USD)) for row in rows]
        projected = [to_number(row.get(ColumnNames.CUMULATIVE_PROJECTED_USD)) for row in rows]
        budget = [to_number(row.get(ColumnNames.CUMULATIVE_BUDGET_USD)) for row in rows]
        statuses = [str(row.get(ColumnNames.PERIOD_STATUS) or "") for row in rows]

        max_value = safe_denominator(max(actual + projected + budget) * 1.1)
        scale = LinearScale.vertical(max_value, plot)
        xs = [point_x(i, n, plot) for i in range(n)]

        surface.stroke_style = COLOR_GRID_SOFT
        surface.line_width = 1
        ticks = scale.ticks(CASH_FLOW_GRID_INTERVALS)
        for _, y in ticks:
            surface.begin_path()
            surface.move_to(plot.left, y)
            surface.line_to(plot.right, y)
            surface.stroke()

        current = next((i for i, s in enumerate(statuses) if s == PeriodStatus.CURRENT), -1)
        actual_end = current if current >= 0 else n - 1
        projection_start = max(current, 0)

        # Budget
        surface.stroke_style = LINE_COLORS["budget"]
        surface.line_width = 1.5
        surface.set_line_dash([6, 4])
        self._polyline([(xs[i], scale(budget[i])) for i in range(n)])
        surface.set_line_dash([])

        # Actual, with fill underneath
        actual_points = [(xs[i], scale(actual[i])) for i in range(actual_end + 1)]
        surface.stroke_style = LINE_COLORS["actual"]
        surface.line_width = 2.5
        self._polyline(actual_points)

        surface.fill_style = CASH_FLOW_ACTUAL_FILL
        surface.begin_path()
        surface.move_to(xs[0], plot.bottom)
        for x, y in actual_points:
            surface.line_to(x, y)
        surface.line_to(xs[actual_end], plot.bottom)
        surface.close_path()
        surface.fill()

        # Projected (cumulative actual + projected)
        if projection_start < n - 1:
            surface.stroke_style = LINE_COLORS["projected"]
            surface.line_width = 2
            surface.set_line_dash([5, 3])
            self._polyline(
                [(xs[i], scale(actual[i] + projected[i])) for i in range(projection_start, n)]
            )
            surface.set_line_dash([])

        elements = []
        for i in range(n):
            if statuses[i] != PeriodStatus.PROJECTED:
                self._dot(xs[i], scale(actual[i]), LINE_COLORS["actual"])
            if statuses[i] != PeriodStatus.ACTUAL:
                self._dot(xs[i], scale(actual[i] + projected[i]), LINE_COLORS["projected"])

            self.points.append(
                CashFlowPoint(
                    x=xs[i],
                    label=labels[i],
                    actual=actual[i],
                    projected=projected[i],
                    budget=budget[i],
                    status=statuses[i],
                )
            )
            elements.append(
                HitTestElement(
                    kind=ElementKind.POINT,
                    x=xs[i],
                    y=scale(actual[i] + projected[i]),
                    label=labels[i],
                    formatted_value=format_currency(actual[i] + projected[i]),
                )
            )

        surface.fill_style = COLOR_TEXT_MUTED
        surface.font = settings.font(10)
        surface.text_align = "center"
        step = x_label_step(n)
        for i, label in enumerate(labels):
            if i % step == 0 or i == n - 1:
                surface.fill_text(label, xs[i], surface.height - 10)

        surface.text_align = "right"
        for value, y in ticks:
            surface.fill_text(format_currency(value), plot.left - 5, y + 4)
        return elements

    def _polyline(self, points: Sequence[tuple[float, float]]) -> None:
        self.surface.begin_path()
        for i, (x, y) in enumerate(points):
            if i == 0:
                self.surface.move_to(x, y)
            else:
                self.surface.line_to(x, y)
        self.surface.stroke()

    def _dot(self, x: float, y: float, color: str) -> None:
        self.surface.fill_style = color
        self.surface.begin_path()
        self.surface.arc(x, y, 3, 0, 2 * math.pi)
        self.surface.fill()

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------

    def pointer_move(self, x: float, y: float) -> TooltipState:
        if not self.is_line_mode:
            return super().pointer_move(x, y)

        index = nearest_by_x(x, [p.x for p in self.points], self.settings.nearest_x_radius)
        if index is None:
            self._set_tooltip(TooltipState.hidden())
            return self.tooltip

        point = self.points[index]
        lines = [
            TooltipLine(text=point.label, color=COLOR_TEXT_LABEL, bold=True),
            TooltipLine(
                text=f"Actual: {format_currency(point.actual)}", color=LINE_COLORS["actual"]
            ),
        ]
        if point.projected > 0:
            lines.append(
                TooltipLine(
                    text=f"Projected: {format_currency(point.actual + point.projected)}",
                    color=LINE_COLORS["projected"],
                )
            )
        lines.append(
            TooltipLine(
                text=f"Budget: {format_currency(point.budget)}", color=LINE_COLORS["budget"]
            )
        )
        self._set_tooltip(
            TooltipState(
                visible=True,
                x=point.x,
                y=TOOLTIP_TOP,
                label=point.label,
                formatted_value=lines[1].text,
                lines=lines,
            )
        )
        return self.tooltip
