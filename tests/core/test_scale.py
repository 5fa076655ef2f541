"""Tests for scale and layout math."""

import math

import pytest

from canvas_charts.core.scale import (
    BandLayout,
    ClusterLayout,
    LinearScale,
    Padding,
    PlotRect,
    fit_label_padding,
    label_step,
    line_domain,
    padding_for,
    point_x,
    safe_denominator,
    value_axis_max,
)
from canvas_charts.surfaces import RecordingSurface


def test_value_axis_max_headroom() -> None:
    assert value_axis_max([10, 50, 20]) == pytest.approx(55.0)


@pytest.mark.parametrize("values", [[0, 0, 0], [], [-5, -1], [math.nan]])
def test_value_axis_max_clamps_to_one(values) -> None:
    assert value_axis_max(values) == 1.0


def test_safe_denominator() -> None:
    assert safe_denominator(0) == 1.0
    assert safe_denominator(math.nan) == 1.0
    assert safe_denominator(4.0) == 4.0


def test_line_domain() -> None:
    low, high = line_domain([100, 200])
    assert low == pytest.approx(90.0)
    assert high == pytest.approx(220.0)


def test_line_domain_never_collapses() -> None:
    low, high = line_domain([0, 0])
    assert high - low == 1.0


def test_padding_profile() -> None:
    assert padding_for(True) == Padding(top=25, right=30, bottom=60, left=55)
    assert padding_for(False).top == 12


def test_plot_rect_geometry() -> None:
    plot = PlotRect.from_canvas(600, 270, padding_for(False))
    assert (plot.left, plot.top, plot.right, plot.bottom) == (55, 12, 570, 210)
    assert plot.width == 515
    assert plot.height == 198


def test_fit_label_padding_widens_for_long_labels() -> None:
    surface = RecordingSurface()
    base = padding_for(False)
    # 18 chars * 10px * 0.55 = 99px, + 15px gutter
    padded = fit_label_padding(base, surface, ["x" * 30], "10px sans-serif", 18)
    assert padded.left == pytest.approx(114.0)
    narrow = fit_label_padding(base, surface, ["ab"], "10px sans-serif", 18)
    assert narrow.left == 55


def test_linear_scale_maps_and_ticks() -> None:
    plot = PlotRect.from_canvas(600, 270, padding_for(False))
    scale = LinearScale.vertical(100, plot)
    assert scale(0) == plot.bottom
    assert scale(100) == plot.top
    ticks = scale.ticks(4)
    assert [value for value, _ in ticks] == [0, 25, 50, 75, 100]
    assert ticks[-1][1] == plot.top


def test_band_layout_vertical_bars() -> None:
    band = BandLayout.across(55, 500, 5, 0.65)
    assert band.slot == 100
    assert band.bar_width == pytest.approx(65)
    assert band.gap == pytest.approx(35)
    assert band.offset(0) == pytest.approx(55 + 17.5)
    assert band.center(1) == pytest.approx(55 + 100 + 50)


def test_cluster_layout() -> None:
    layout = ClusterLayout.across(0, 300, 3, 4)
    assert layout.category_width == 100
    assert layout.cluster_width == pytest.approx(20)
    assert layout.gap == pytest.approx(20)
    assert layout.offset(1, 2) == pytest.approx(100 + 10 + 40)
    assert layout.center(2) == 250


def test_point_x_spreads_points() -> None:
    plot = PlotRect.from_canvas(600, 270, padding_for(False))
    assert point_x(0, 3, plot) == plot.left
    assert point_x(2, 3, plot) == plot.right
    # a single point sits on the left edge
    assert point_x(0, 1, plot) == plot.left


def test_label_step() -> None:
    assert label_step(10) == 1
    assert label_step(11) == 2
    assert label_step(25) == 3
    assert label_step(60, 8) == 8
