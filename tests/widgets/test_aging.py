"""Tests for the AP aging aggregation and widget."""

import pytest

from canvas_charts.constants import AGING_COLORS
from canvas_charts.schemas import ElementKind
from canvas_charts.surfaces import RecordingSurface
from canvas_charts.widgets.aging import AgingChart, aggregate_aging


@pytest.fixture
def aging_rows() -> list[dict]:
    return [
        {"bucket": "2. 31-60 days", "amount_inr": 1_000_000_000},
        {"bucket": "1. 0-30 days", "amount_inr": 1_500_000_000},
        {"bucket": "1. 0-30 days", "amount_inr": 500_000_000},
        {"bucket": "2. 31-60 days", "amount_inr": 1_000_000_000},
    ]


def test_aggregate_sums_and_sorts(aging_rows) -> None:
    buckets = aggregate_aging(aging_rows)

    assert [b.label for b in buckets] == ["0-30 days", "31-60 days"]
    assert [b.raw_label for b in buckets] == ["1. 0-30 days", "2. 31-60 days"]
    assert [b.pct for b in buckets] == [50.0, 50.0]
    assert [b.height_pct for b in buckets] == [100.0, 100.0]
    assert buckets[0].amount_text == "2.00B"
    assert buckets[0].pct_text == "50.0%"
    assert [b.color for b in buckets] == AGING_COLORS[:2]


def test_missing_bucket_and_amount() -> None:
    buckets = aggregate_aging([{"amount_inr": 5}, {"bucket": "1. 0-30 days", "amount_inr": None}])
    assert [b.label for b in buckets] == ["0-30 days", "Unknown"]
    assert buckets[0].amount == 0
    assert buckets[1].pct == 100.0


def test_colors_clamp_to_last() -> None:
    rows = [{"bucket": f"{i}. b{i}", "amount_inr": i} for i in range(1, 9)]
    buckets = aggregate_aging(rows)
    assert buckets[5].color == AGING_COLORS[5]
    assert buckets[6].color == AGING_COLORS[-1]
    assert buckets[7].color == AGING_COLORS[-1]


def test_all_zero_amounts() -> None:
    buckets = aggregate_aging([{"bucket": "1. 0-30", "amount_inr": 0}])
    assert buckets[0].pct == 0.0
    assert buckets[0].height_pct == 0.0


def test_empty_input() -> None:
    assert aggregate_aging([]) == []
    assert AgingChart(RecordingSurface()).render([]) == []


def test_aging_chart_draws_buckets(aging_rows) -> None:
    surface = RecordingSurface(600, 270)
    chart = AgingChart(surface)
    elements = chart.render(aging_rows)

    assert len(elements) == 2
    first = elements[0]
    assert first.kind == ElementKind.BAR
    assert (first.x, first.y, first.width, first.height) == (0, 34, 299, 218)
    assert first.formatted_value == "2.00B"
    assert first.detail == "50.0% of total"
    assert elements[1].x == 301

    assert {"2.00B", "50.0%", "0-30 days", "31-60 days"} <= set(surface.texts())
    assert len(surface.calls_named("round_rect")) == 2


def test_aging_tooltip_carries_share(aging_rows) -> None:
    chart = AgingChart(RecordingSurface(600, 270))
    chart.render(aging_rows)
    tooltip = chart.pointer_move(350, 200)
    assert tooltip.label == "31-60 days"
    assert tooltip.detail == "50.0% of total"


def test_other_chart_types_use_engine(aging_rows) -> None:
    chart = AgingChart(RecordingSurface(600, 270))
    elements = chart.render(aging_rows, chart_type="pie_chart")

    assert chart.buckets == []
    assert len(elements) == 4
    assert all(el.kind == ElementKind.SLICE for el in elements)
