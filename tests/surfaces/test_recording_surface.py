"""Tests for the recording surface and font parsing."""

from canvas_charts.schemas.defaults import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from canvas_charts.surfaces import RecordingSurface
from canvas_charts.surfaces.fonts import parse_font


def test_calls_capture_style_state() -> None:
    surface = RecordingSurface()
    surface.fill_style = "#b4862e"
    surface.fill_rect(1, 2, 3, 4)

    call = surface.calls_named("fill_rect")[0]
    assert call.args == (1, 2, 3, 4)
    assert call.style["fill_style"] == "#b4862e"


def test_save_restore_round_trips_style() -> None:
    surface = RecordingSurface()
    surface.text_align = "left"
    surface.save()
    surface.text_align = "right"
    surface.set_line_dash([4, 2])
    surface.restore()
    assert surface.text_align == "left"

    surface.stroke()
    assert surface.calls_named("stroke")[0].style["line_dash"] == ()


def test_clear_resets_calls_and_style() -> None:
    surface = RecordingSurface()
    surface.font = "bold 11px serif"
    surface.fill_text("hello", 0, 0)
    surface.clear()

    assert [call.name for call in surface.calls] == ["clear"]
    assert surface.font == "10px sans-serif"
    assert surface.is_blank


def test_resize_changes_dimensions() -> None:
    surface = RecordingSurface(600, 270)
    surface.resize(800, 400)
    assert (surface.width, surface.height) == (800, 400)


def test_measure_text_is_deterministic() -> None:
    surface = RecordingSurface(char_width_ratio=0.5)
    surface.font = "12px sans-serif"
    assert surface.measure_text("abcd") == 24


def test_parse_font() -> None:
    spec = parse_font("italic bold 9px Helvetica Neue")
    assert spec.size == 9
    assert spec.weight == "bold"
    assert spec.style == "italic"
    assert spec.family == "Helvetica Neue"


def test_parse_font_falls_back_to_default() -> None:
    spec = parse_font("huge")
    assert spec.size == 10
    assert spec.weight == "normal"


def test_default_size_matches_canvas_defaults() -> None:
    surface = RecordingSurface()
    assert (surface.width, surface.height) == (DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)
