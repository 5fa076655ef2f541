"""Tests for the cash outflow forecast widget."""

from datetime import date

import pytest

from canvas_charts.constants import LINE_COLORS
from canvas_charts.schemas import ElementKind
from canvas_charts.surfaces import RecordingSurface
from canvas_charts.widgets.cash_flow import CashFlowChart, summarize, x_label_step

TODAY = date(2025, 6, 30)


@pytest.fixture
def chart() -> CashFlowChart:
    return CashFlowChart(RecordingSurface(600, 270))


def test_summarize(forecast_rows) -> None:
    summary = summarize(forecast_rows)
    assert summary.total_actual_usd == 4_000_000
    assert summary.total_projected_usd == 1_500_000
    assert summary.total_budget_usd == 7_200_000
    assert summary.variance_usd == -1_700_000
    assert summary.variance_pct == pytest.approx(-23.61, abs=0.01)
    assert summary.variance_text == "$1.7M (-23.6%)"


def test_summarize_over_budget() -> None:
    rows = [{"cumulative_actual_usd": 150, "cumulative_budget_usd": 100}]
    summary = summarize(rows)
    assert summary.variance_text == "+$50 (+50.0%)"


def test_summarize_empty_and_zero_budget() -> None:
    assert summarize([]).variance_usd == 0
    assert summarize([{"cumulative_actual_usd": 10}]).variance_pct == 0.0


@pytest.mark.parametrize("count, step", [(3, 1), (6, 1), (7, 2), (15, 2), (16, 2), (25, 3)])
def test_x_label_step(count, step) -> None:
    assert x_label_step(count) == step


def test_render_points(chart, forecast_rows) -> None:
    elements = chart.render(forecast_rows, today=TODAY)

    assert len(elements) == 6
    assert all(el.kind == ElementKind.POINT for el in elements)
    # plot spans x = 80 .. 580
    assert [el.x for el in elements] == pytest.approx([80, 180, 280, 380, 480, 580])
    assert elements[4].label == "May 2025"
    assert elements[4].formatted_value == "$5.0M"


def test_series_styles(chart, forecast_rows) -> None:
    chart.render(forecast_rows, today=TODAY)
    strokes = chart.surface.calls_named("stroke")

    budget = [c for c in strokes if c.style["stroke_style"] == LINE_COLORS["budget"]]
    assert budget[0].style["line_dash"] == (6, 4)
    projected = [c for c in strokes if c.style["stroke_style"] == LINE_COLORS["projected"]]
    assert projected[0].style["line_dash"] == (5, 3)
    actual = [c for c in strokes if c.style["stroke_style"] == LINE_COLORS["actual"]]
    assert actual[0].style["line_dash"] == ()
    assert actual[0].style["line_width"] == 2.5

    assert ((6, 4),) in [c.args for c in chart.surface.calls_named("set_line_dash")]


def test_dots_follow_status(chart, forecast_rows) -> None:
    chart.render(forecast_rows, today=TODAY)
    # 3 ACTUAL months: actual dot only; CURRENT: both; 2 PROJECTED: projected only
    assert len(chart.surface.calls_named("arc")) == 7


def test_hover_actual_month(chart, forecast_rows) -> None:
    chart.render(forecast_rows, today=TODAY)
    tooltip = chart.pointer_move(190, 120)

    assert tooltip.visible
    assert tooltip.label == "Feb 2025"
    assert (tooltip.x, tooltip.y) == (180, 20)
    assert [line.text for line in tooltip.lines] == [
        "Feb 2025",
        "Actual: $2.0M",
        "Budget: $2.4M",
    ]
    assert tooltip.lines[0].bold


def test_hover_projected_month(chart, forecast_rows) -> None:
    chart.render(forecast_rows, today=TODAY)
    tooltip = chart.pointer_move(470, 5)
    assert [line.text for line in tooltip.lines] == [
        "May 2025",
        "Actual: $4.0M",
        "Projected: $5.0M",
        "Budget: $6.0M",
    ]


def test_hover_between_points_hides(chart, forecast_rows) -> None:
    chart.render(forecast_rows, today=TODAY)
    chart.pointer_move(180, 100)
    assert not chart.pointer_move(230, 100).visible


def test_time_window_filter(chart, forecast_rows) -> None:
    elements = chart.render(forecast_rows, window="90d", today=TODAY)
    assert [el.label for el in elements] == ["Apr 2025", "May 2025", "Jun 2025"]


def test_future_labels_rolled_back(chart, forecast_rows) -> None:
    elements = chart.render(forecast_rows, today=date(2025, 3, 1))
    assert [el.label for el in elements][-1] == "Jun 2024"


def test_bar_mode_uses_engine(chart, forecast_rows) -> None:
    elements = chart.render(forecast_rows, chart_type="vertical_bar_chart", today=TODAY)
    assert len(elements) == 6
    assert all(el.kind == ElementKind.BAR for el in elements)
    assert chart.points == []
    # bars hover with the generic hit test
    bar = elements[0]
    assert chart.pointer_move(bar.x + 1, bar.y + 1).label == "Jan 2025"
