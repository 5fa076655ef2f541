"""In-memory surface that records every drawing call.

Used by the test-suite and by hosts that replay the calls onto their own
canvas (e.g. a browser canvas fed over a websocket). Text is measured with a
fixed per-character width so layouts are deterministic.
"""

from dataclasses import dataclass, field
from typing import Any, Sequence

from canvas_charts.schemas.defaults import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from canvas_charts.surfaces.fonts import parse_font

# Average glyph width as a share of the font size for a sans-serif face.
CHAR_WIDTH_RATIO = 0.55

_STYLE_FIELDS = (
    "fill_style",
    "stroke_style",
    "line_width",
    "line_join",
    "line_cap",
    "font",
    "text_align",
)


@dataclass(frozen=True)
class DrawCall:
    """One recorded call with the style state active when it ran."""

    name: str
    args: tuple[Any, ...]
    style: dict[str, Any] = field(default_factory=dict)


class RecordingSurface:
    """A DrawingSurface that stores calls instead of rasterizing them.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        calls: Recorded calls since the last clear.
    """

    def __init__(
        self,
        width: float = DEFAULT_CANVAS_WIDTH,
        height: float = DEFAULT_CANVAS_HEIGHT,
        char_width_ratio: float = CHAR_WIDTH_RATIO,
    ) -> None:
        self.width = width
        self.height = height
        self.char_width_ratio = char_width_ratio
        self.calls: list[DrawCall] = []
        self._stack: list[dict[str, Any]] = []
        self._line_dash: tuple[float, ...] = ()
        self._reset_style()

    def _reset_style(self) -> None:
        self.fill_style = "#000"
        self.stroke_style = "#000"
        self.line_width = 1.0
        self.line_join = "miter"
        self.line_cap = "butt"
        self.font = "10px sans-serif"
        self.text_align = "start"

    def _style(self) -> dict[str, Any]:
        style = {name: getattr(self, name) for name in _STYLE_FIELDS}
        style["line_dash"] = self._line_dash
        return style

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(DrawCall(name, tuple(args), self._style()))

    # ------------------------------------------------------------------
    # Surface state
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self.calls = []
        self._stack = []
        self._line_dash = ()
        self._reset_style()
        self._record("clear")

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.clear()

    def save(self) -> None:
        self._stack.append(self._style())
        self._record("save")

    def restore(self) -> None:
        if self._stack:
            style = self._stack.pop()
            self._line_dash = style.pop("line_dash")
            for name, value in style.items():
                setattr(self, name, value)
        self._record("restore")

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)

    def set_line_dash(self, segments: Sequence[float]) -> None:
        self._line_dash = tuple(segments)
        self._record("set_line_dash", self._line_dash)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle)

    def round_rect(
        self, x: float, y: float, width: float, height: float, radii: Sequence[float]
    ) -> None:
        self._record("round_rect", x, y, width, height, tuple(radii))

    def fill(self) -> None:
        self._record("fill")

    def stroke(self) -> None:
        self._record("stroke")

    # ------------------------------------------------------------------
    # Immediate drawing
    # ------------------------------------------------------------------

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("fill_rect", x, y, width, height)

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._record("fill_text", str(text), x, y)

    def measure_text(self, text: str) -> float:
        return len(str(text)) * parse_font(self.font).size * self.char_width_ratio

    # ------------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------------

    def calls_named(self, name: str) -> list[DrawCall]:
        return [call for call in self.calls if call.name == name]

    def texts(self) -> list[str]:
        """Every string drawn with fill_text, in order."""
        return [call.args[0] for call in self.calls_named("fill_text")]

    @property
    def is_blank(self) -> bool:
        """True when nothing but clears/state changes were recorded."""
        drawing = {"fill", "stroke", "fill_rect", "fill_text"}
        return not any(call.name in drawing for call in self.calls)
