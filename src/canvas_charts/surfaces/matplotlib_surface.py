"""Matplotlib-backed drawing surface.

Replays canvas-style calls onto a `matplotlib.figure.Figure` whose single
axes spans the whole figure in pixel coordinates (y pointing down), so the
renderers produce a software raster without knowing about matplotlib.
Hosts embed `surface.figure` directly, e.g. in a notebook or a web app.
"""

import math
import re
from typing import Sequence

import matplotlib
import numpy as np
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import PathPatch, Polygon
from matplotlib.path import Path
from matplotlib.textpath import TextPath

from canvas_charts.schemas.defaults import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from canvas_charts.surfaces.fonts import parse_font

# Ensure non-interactive backend for thread safety in hosts
matplotlib.use("Agg")

_RGBA_RE = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$"
)
_ALIGN = {"left": "left", "start": "left", "right": "right", "end": "right", "center": "center"}
_CAPS = {"butt": "butt", "round": "round", "square": "projecting"}


def parse_color(color: str) -> tuple[float, float, float, float]:
    """CSS color (hex, named or rgb()/rgba()) to a matplotlib RGBA tuple."""
    match = _RGBA_RE.match(color.strip())
    if match:
        r, g, b, a = match.groups()
        return (float(r) / 255, float(g) / 255, float(b) / 255, float(a or 1.0))
    return to_rgba(color)


class MatplotlibSurface:
    """A DrawingSurface rendering into a matplotlib Figure.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        dpi: Figure resolution; one pixel is 72/dpi points.
        figure: The figure being drawn on.
    """

    def __init__(
        self,
        width: float = DEFAULT_CANVAS_WIDTH,
        height: float = DEFAULT_CANVAS_HEIGHT,
        dpi: int = 100,
    ) -> None:
        self.width = width
        self.height = height
        self.dpi = dpi
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.clear()

    # ------------------------------------------------------------------
    # Surface state
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self.figure.clear()
        self.axes = self.figure.add_axes((0, 0, 1, 1))
        self.axes.set_xlim(0, self.width)
        self.axes.set_ylim(self.height, 0)
        self.axes.set_axis_off()

        self.fill_style = "#000"
        self.stroke_style = "#000"
        self.line_width = 1.0
        self.line_join = "miter"
        self.line_cap = "butt"
        self.font = "10px sans-serif"
        self.text_align = "start"

        self._matrix = np.identity(3)
        self._line_dash: tuple[float, ...] = ()
        self._stack: list[tuple] = []
        self._vertices: list[tuple[float, float]] = []
        self._codes: list[int] = []
        self._subpath_start: tuple[float, float] | None = None
        self._zorder = 0

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.figure.set_size_inches(width / self.dpi, height / self.dpi)
        self.clear()

    def save(self) -> None:
        self._stack.append(
            (
                self.fill_style,
                self.stroke_style,
                self.line_width,
                self.line_join,
                self.line_cap,
                self.font,
                self.text_align,
                self._line_dash,
                self._matrix.copy(),
            )
        )

    def restore(self) -> None:
        if not self._stack:
            return
        (
            self.fill_style,
            self.stroke_style,
            self.line_width,
            self.line_join,
            self.line_cap,
            self.font,
            self.text_align,
            self._line_dash,
            self._matrix,
        ) = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        self._matrix = self._matrix @ np.array([[1, 0, x], [0, 1, y], [0, 0, 1]])

    def rotate(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        self._matrix = self._matrix @ np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])

    def set_line_dash(self, segments: Sequence[float]) -> None:
        self._line_dash = tuple(segments)

    def _apply(self, x: float, y: float) -> tuple[float, float]:
        px, py, _ = self._matrix @ np.array([x, y, 1.0])
        return float(px), float(py)

    def _next_z(self) -> int:
        self._zorder += 1
        return self._zorder

    def _px_to_points(self, pixels: float) -> float:
        return pixels * 72.0 / self.dpi

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def begin_path(self) -> None:
        self._vertices = []
        self._codes = []
        self._subpath_start = None

    def close_path(self) -> None:
        if self._subpath_start is None:
            return
        self._vertices.append(self._subpath_start)
        self._codes.append(Path.CLOSEPOLY)

    def move_to(self, x: float, y: float) -> None:
        point = self._apply(x, y)
        self._vertices.append(point)
        self._codes.append(Path.MOVETO)
        self._subpath_start = point

    def line_to(self, x: float, y: float) -> None:
        if self._subpath_start is None:
            self.move_to(x, y)
            return
        self._vertices.append(self._apply(x, y))
        self._codes.append(Path.LINETO)

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        sweep = end_angle - start_angle
        steps = max(8, int(abs(sweep) / (2 * math.pi) * 64))
        for i, t in enumerate(np.linspace(start_angle, end_angle, steps + 1)):
            px, py = x + radius * math.cos(t), y + radius * math.sin(t)
            if i == 0 and self._subpath_start is None:
                self.move_to(px, py)
            else:
                self.line_to(px, py)

    def round_rect(
        self, x: float, y: float, width: float, height: float, radii: Sequence[float]
    ) -> None:
        if height < 0:
            y, height = y + height, -height
        if width < 0:
            x, width = x + width, -width
        limit = min(width, height) / 2
        tl, tr, br, bl = (min(max(r, 0.0), limit) for r in (list(radii) + [0] * 4)[:4])

        self.move_to(x + tl, y)
        self.line_to(x + width - tr, y)
        self.arc(x + width - tr, y + tr, tr, -math.pi / 2, 0)
        self.line_to(x + width, y + height - br)
        self.arc(x + width - br, y + height - br, br, 0, math.pi / 2)
        self.line_to(x + bl, y + height)
        self.arc(x + bl, y + height - bl, bl, math.pi / 2, math.pi)
        self.line_to(x, y + tl)
        self.arc(x + tl, y + tl, tl, math.pi, 1.5 * math.pi)
        self.close_path()

    def _path(self) -> Path | None:
        if not self._vertices:
            return None
        return Path(self._vertices, self._codes)

    def fill(self) -> None:
        path = self._path()
        if path is None:
            return
        self.axes.add_patch(
            PathPatch(
                path,
                facecolor=parse_color(self.fill_style),
                edgecolor="none",
                linewidth=0,
                zorder=self._next_z(),
            )
        )

    def stroke(self) -> None:
        path = self._path()
        if path is None:
            return
        linestyle = "solid"
        if self._line_dash:
            linestyle = (0, tuple(seg / max(self.line_width, 1e-6) for seg in self._line_dash))
        self.axes.add_patch(
            PathPatch(
                path,
                fill=False,
                edgecolor=parse_color(self.stroke_style),
                linewidth=self._px_to_points(self.line_width),
                linestyle=linestyle,
                joinstyle=self.line_join if self.line_join in ("miter", "round", "bevel") else "miter",
                capstyle=_CAPS.get(self.line_cap, "butt"),
                zorder=self._next_z(),
            )
        )

    # ------------------------------------------------------------------
    # Immediate drawing
    # ------------------------------------------------------------------

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [
            self._apply(x, y),
            self._apply(x + width, y),
            self._apply(x + width, y + height),
            self._apply(x, y + height),
        ]
        self.axes.add_patch(
            Polygon(
                corners,
                closed=True,
                facecolor=parse_color(self.fill_style),
                edgecolor="none",
                zorder=self._next_z(),
            )
        )

    def fill_text(self, text: str, x: float, y: float) -> None:
        spec = parse_font(self.font)
        px, py = self._apply(x, y)
        # y points down, so a clockwise canvas rotation is a negative angle here
        angle = -math.degrees(math.atan2(self._matrix[1, 0], self._matrix[0, 0]))
        self.axes.text(
            px,
            py,
            str(text),
            color=parse_color(self.fill_style),
            fontsize=self._px_to_points(spec.size),
            fontweight=spec.weight,
            fontstyle=spec.style,
            family=spec.family,
            ha=_ALIGN.get(self.text_align, "left"),
            va="baseline",
            rotation=angle,
            rotation_mode="anchor",
            zorder=self._next_z(),
        )

    def measure_text(self, text: str) -> float:
        text = str(text)
        if not text:
            return 0.0
        spec = parse_font(self.font)
        prop = FontProperties(family=spec.family, weight=spec.weight, style=spec.style)
        return float(TextPath((0, 0), text, size=spec.size, prop=prop).get_extents().width)
