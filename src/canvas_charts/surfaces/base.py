"""Drawing surface protocol.

Renderers only talk to this small canvas-2D-like interface, so the same
chart code can drive an in-memory recorder, a matplotlib figure or any
other 2D backend. Coordinates are canvas pixels with y growing downward.
"""

from typing import Protocol, Sequence


class DrawingSurface(Protocol):
    """Protocol all drawing backends must implement.

    Style attributes follow canvas semantics: they are read when a fill,
    stroke or text call happens, and `save`/`restore` push and pop them
    together with the current transform.
    """

    width: float
    height: float

    fill_style: str
    stroke_style: str
    line_width: float
    line_join: str
    line_cap: str
    font: str
    text_align: str

    def clear(self) -> None:
        """Erase the whole surface."""
        ...

    def resize(self, width: float, height: float) -> None:
        """Change the pixel size; implies clear."""
        ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None:
        """Rotate subsequent drawing by `angle` radians (clockwise on screen)."""
        ...

    def set_line_dash(self, segments: Sequence[float]) -> None: ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        """Add a clockwise circular arc to the current path."""
        ...

    def round_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radii: Sequence[float],
    ) -> None:
        """Add a rectangle with [top-left, top-right, bottom-right, bottom-left] radii."""
        ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def measure_text(self, text: str) -> float:
        """Rendered width of `text` in the current font."""
        ...
