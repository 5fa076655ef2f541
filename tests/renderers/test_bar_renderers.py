"""Tests for the horizontal and vertical bar renderers."""

import math

import pytest

from canvas_charts.core.columns import ResolvedColumns
from canvas_charts.renderers.bars import HorizontalBarRenderer, VerticalBarRenderer
from canvas_charts.schemas import ChartType, ElementKind

COLUMNS = ResolvedColumns(category="vendor", value="spend")


def test_vertical_bars_one_element_per_row(context_factory, rows_factory) -> None:
    ctx = context_factory(rows_factory(5), COLUMNS)
    elements = VerticalBarRenderer().draw(ctx)

    assert len(elements) == 5
    assert all(el.kind == ElementKind.BAR for el in elements)
    assert [el.label for el in elements] == [f"Item {i}" for i in range(5)]
    assert elements[2].formatted_value == "300"


def test_vertical_bar_geometry(context_factory, rows_factory) -> None:
    ctx = context_factory(rows_factory(5), COLUMNS)
    elements = VerticalBarRenderer().draw(ctx)

    # max = 500 * 1.1 = 550 over a 198px tall plot
    tallest = elements[-1]
    assert tallest.height == pytest.approx(500 / 550 * 198)
    assert tallest.y + tallest.height == pytest.approx(ctx.plot.bottom)
    # 65% of a 103px slot
    assert tallest.width == pytest.approx(515 / 5 * 0.65)


def test_vertical_bar_labels_are_rotated(context_factory, rows_factory) -> None:
    ctx = context_factory(rows_factory(3), COLUMNS)
    VerticalBarRenderer().draw(ctx)
    rotations = ctx.surface.calls_named("rotate")
    assert len(rotations) == 3
    assert rotations[0].args[0] == pytest.approx(-math.pi / 6)


def test_vertical_bar_uses_row_aliases(context_factory) -> None:
    rows = [{"category": "Travel", "total_spend": 40}]
    ctx = context_factory(rows, ResolvedColumns(category="x", value="y"))
    elements = VerticalBarRenderer().draw(ctx)
    assert elements[0].label == "Travel"
    assert elements[0].formatted_value == "40"


def test_all_zero_values_draw_zero_height_bars(context_factory) -> None:
    rows = [{"vendor": "A", "spend": 0}, {"vendor": "B", "spend": 0}]
    ctx = context_factory(rows, COLUMNS)
    elements = VerticalBarRenderer().draw(ctx)
    for el in elements:
        assert el.height == 0
        assert not math.isnan(el.y)
    # five gridline labels, then only the category labels (no value labels)
    assert ctx.surface.texts()[5:] == ["A", "B"]


def test_many_bars_step_the_labels(context_factory, rows_factory) -> None:
    ctx = context_factory(rows_factory(15), COLUMNS)
    elements = VerticalBarRenderer().draw(ctx)
    assert len(elements) == 15
    # every second label plus the last one
    assert len(ctx.surface.calls_named("rotate")) == 8


def test_horizontal_bars(context_factory, rows_factory) -> None:
    ctx = context_factory(rows_factory(5), COLUMNS, ChartType.HORIZONTAL_BAR)
    elements = HorizontalBarRenderer().draw(ctx)

    assert len(elements) == 5
    assert all(el.x == 55 for el in elements)
    assert elements[-1].width == pytest.approx(500 / 550 * 515)
    assert 12 <= elements[0].height <= 22
    assert elements[0].y < elements[1].y


def test_horizontal_bars_widen_padding_for_long_labels(context_factory) -> None:
    rows = [{"vendor": "Consolidated Industrial Holdings", "spend": 10}]
    ctx = context_factory(rows, COLUMNS, ChartType.HORIZONTAL_BAR)
    elements = HorizontalBarRenderer().draw(ctx)
    # 18 chars at 10px * 0.55 + 15px gutter
    assert elements[0].x == pytest.approx(18 * 5.5 + 15)
    assert "Consolidated Indu…" in ctx.surface.texts()


def test_horizontal_zero_bars_keep_sliver(context_factory) -> None:
    rows = [{"vendor": "A", "spend": 0}, {"vendor": "B", "spend": 0}]
    ctx = context_factory(rows, COLUMNS, ChartType.HORIZONTAL_BAR)
    elements = HorizontalBarRenderer().draw(ctx)

    assert [el.width for el in elements] == [0, 0]
    drawn = ctx.surface.calls_named("round_rect")
    assert [call.args[2] for call in drawn] == [1.0, 1.0]


def test_palette_cycles(context_factory, rows_factory, settings) -> None:
    ctx = context_factory(rows_factory(12), COLUMNS)
    VerticalBarRenderer().draw(ctx)
    fills = [
        call.style["fill_style"]
        for call in ctx.surface.calls_named("fill")
    ]
    assert fills[0] == settings.palette[0]
    assert fills[10] == settings.palette[0]
    assert fills[11] == settings.palette[1]
