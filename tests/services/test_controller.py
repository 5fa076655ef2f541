"""Tests for the interactive chart controller."""

from canvas_charts.schemas import EngineSettings
from canvas_charts.services.controller import ChartController
from canvas_charts.surfaces import RecordingSurface


def test_render_stores_elements(controller, rows_factory) -> None:
    elements = controller.render(rows_factory(4), None, "vertical_bar_chart")
    assert len(elements) == 4
    assert controller.elements == elements
    assert controller.last_result.drawn_count == 4


def test_pointer_move_over_bar_shows_tooltip(controller, rows_factory) -> None:
    elements = controller.render(rows_factory(4), None, "vertical_bar_chart")
    bar = elements[3]
    tooltip = controller.pointer_move(bar.x + 1, bar.y + 1)

    assert tooltip.visible
    assert tooltip.label == "Item 3"
    assert tooltip.formatted_value == "400"
    assert (tooltip.x, tooltip.y) == (bar.x + bar.width / 2, bar.y)


def test_pointer_move_on_empty_space_hides_tooltip(controller, rows_factory) -> None:
    controller.render(rows_factory(4), None, "vertical_bar_chart")
    assert not controller.pointer_move(2, 2).visible


def test_pointer_leave_hides_and_notifies(rows_factory) -> None:
    seen = []
    chart = ChartController(RecordingSurface(), on_hover=seen.append)
    elements = chart.render(rows_factory(3), None, "line_chart")

    chart.pointer_move(elements[1].x + 5, elements[1].y - 5)
    chart.pointer_leave()

    assert [t.visible for t in seen] == [True, False]
    assert seen[0].y == elements[1].y - 10
    assert not chart.tooltip.visible


def test_click_reports_element(rows_factory) -> None:
    clicked = []
    chart = ChartController(RecordingSurface(), on_element_click=clicked.append)
    elements = chart.render(rows_factory(3), None, "vertical_bar_chart")

    bar = elements[0]
    assert chart.click(bar.x + 1, bar.y + 1) == bar
    assert chart.click(1, 1) is None
    assert clicked == [bar]


def test_resize_redraws_with_last_inputs(controller, surface, rows_factory) -> None:
    before = controller.render(rows_factory(4), None, "vertical_bar_chart")
    after = controller.resize(800, 400)

    assert (surface.width, surface.height) == (800, 400)
    assert len(after) == len(before)
    assert after[0].x != before[0].x


def test_resize_before_render_only_resizes(controller, surface) -> None:
    assert controller.resize(300, 200) == []
    assert (surface.width, surface.height) == (300, 200)


def test_rerender_hides_stale_tooltip(controller, rows_factory) -> None:
    elements = controller.render(rows_factory(4), None, "vertical_bar_chart")
    controller.pointer_move(elements[0].x + 1, elements[0].y + 1)
    assert controller.tooltip.visible

    controller.render(rows_factory(2), None, "pie_chart")
    assert not controller.tooltip.visible


def test_custom_hit_radius(rows_factory) -> None:
    chart = ChartController(RecordingSurface(), settings=EngineSettings(hit_radius=3))
    elements = chart.render(rows_factory(3), None, "line_chart")
    assert not chart.pointer_move(elements[0].x + 5, elements[0].y).visible
    assert chart.pointer_move(elements[0].x + 2, elements[0].y).visible
