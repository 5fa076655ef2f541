"""Scale and layout math.

Everything here is pure geometry: padding profiles, the usable plot
rectangle, linear value -> pixel maps and the evenly spaced category bands
used by the bar-like charts. The value-axis maximum gets 10% headroom above
the tallest value and is clamped to 1 so no scale ever divides by zero.
"""

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from canvas_charts.surfaces.base import DrawingSurface

VALUE_HEADROOM = 1.1
LINE_FLOOR_RATIO = 0.9
CUMULATIVE_DOMAIN = (0.0, 100.0)
LABEL_GUTTER = 15.0


def safe_denominator(value: float) -> float:
    """Clamp a zero/NaN/negative denominator to 1."""
    if value is None or math.isnan(value) or value <= 0:
        return 1.0
    return value


def value_axis_max(values: Iterable[float], headroom: float = VALUE_HEADROOM) -> float:
    """Top of the value axis: max(values) * headroom, clamped to 1 if not positive."""
    values = list(values)
    if not values:
        return 1.0
    return safe_denominator(max(values) * headroom)


def line_domain(values: Sequence[float]) -> tuple[float, float]:
    """Value domain for line/area charts: [min * 0.9, max * 1.1].

    Returns:
        (low, high) with high - low guaranteed to be non-zero.
    """
    if not values:
        return 0.0, 1.0
    high = max(values) * VALUE_HEADROOM or 1.0
    low = min(values) * LINE_FLOOR_RATIO
    if high - low == 0 or math.isnan(high - low):
        return low, low + 1.0
    return low, high


@dataclass(frozen=True)
class Padding:
    """Space reserved around the plot for titles, ticks and labels."""

    top: float
    right: float
    bottom: float
    left: float


def padding_for(has_title: bool) -> Padding:
    """Base padding profile; the top grows when a title is drawn."""
    return Padding(top=25 if has_title else 12, right=30, bottom=60, left=55)


def fit_label_padding(
    padding: Padding,
    surface: "DrawingSurface",
    labels: Sequence[str],
    font: str,
    max_chars: int,
) -> Padding:
    """Widen the left padding so the longest (truncated) label fits."""
    if not labels:
        return padding
    surface.font = font
    widest = max(surface.measure_text(str(label)[:max_chars]) for label in labels)
    return replace(padding, left=max(padding.left, widest + LABEL_GUTTER))


@dataclass(frozen=True)
class PlotRect:
    """Usable plot rectangle inside a canvas of the given size."""

    canvas_width: float
    canvas_height: float
    padding: Padding

    @property
    def left(self) -> float:
        return self.padding.left

    @property
    def top(self) -> float:
        return self.padding.top

    @property
    def right(self) -> float:
        return self.canvas_width - self.padding.right

    @property
    def bottom(self) -> float:
        return self.canvas_height - self.padding.bottom

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def with_padding(self, padding: Padding) -> "PlotRect":
        return replace(self, padding=padding)

    @classmethod
    def from_canvas(cls, width: float, height: float, padding: Padding) -> "PlotRect":
        return cls(canvas_width=width, canvas_height=height, padding=padding)


@dataclass(frozen=True)
class LinearScale:
    """Linear map from a value domain onto a pixel range.

    The range may be inverted (range_start > range_end), which is how the
    value axis maps larger values to smaller y pixels.
    """

    domain_min: float
    domain_max: float
    range_start: float
    range_end: float

    def __call__(self, value: float) -> float:
        span = self.domain_max - self.domain_min or 1.0
        ratio = (value - self.domain_min) / span
        return self.range_start + ratio * (self.range_end - self.range_start)

    def ticks(self, intervals: int) -> list[tuple[float, float]]:
        """Evenly spaced (value, pixel) pairs from domain_min to domain_max."""
        step = (self.domain_max - self.domain_min) / intervals
        return [
            (self.domain_min + i * step, self(self.domain_min + i * step))
            for i in range(intervals + 1)
        ]

    @classmethod
    def vertical(cls, domain_max: float, plot: PlotRect, domain_min: float = 0.0):
        """Value axis running up from the plot baseline."""
        return cls(domain_min, domain_max, plot.bottom, plot.top)

    @classmethod
    def horizontal(cls, domain_max: float, left: float, right: float):
        """Value axis running right from the left edge."""
        return cls(0.0, domain_max, left, right)


@dataclass(frozen=True)
class BandLayout:
    """Evenly spaced category slots with a bar/gap split.

    Attributes:
        start: Pixel where the first slot begins.
        slot: Width of one category slot.
        bar_ratio: Share of the slot occupied by the bar.
    """

    start: float
    slot: float
    bar_ratio: float

    @property
    def bar_width(self) -> float:
        return self.slot * self.bar_ratio

    @property
    def gap(self) -> float:
        return self.slot * (1 - self.bar_ratio)

    def offset(self, index: int) -> float:
        """Leading edge of the bar at `index`."""
        return self.start + index * (self.bar_width + self.gap) + self.gap / 2

    def center(self, index: int) -> float:
        return self.offset(index) + self.bar_width / 2

    @classmethod
    def across(
        cls, start: float, extent: float, count: int, bar_ratio: float
    ) -> "BandLayout":
        return cls(start=start, slot=extent / max(count, 1), bar_ratio=bar_ratio)


@dataclass(frozen=True)
class ClusterLayout:
    """Category slots subdivided by cluster count.

    Each category keeps 20% of its slot as gap; the remaining 80% is split
    evenly between clusters.
    """

    start: float
    category_width: float
    n_clusters: int

    @property
    def cluster_width(self) -> float:
        return self.category_width * 0.8 / max(self.n_clusters, 1)

    @property
    def gap(self) -> float:
        return self.category_width * 0.2

    def offset(self, category_index: int, cluster_index: int) -> float:
        return (
            self.start
            + category_index * self.category_width
            + self.gap / 2
            + cluster_index * self.cluster_width
        )

    def center(self, category_index: int) -> float:
        return self.start + category_index * self.category_width + self.category_width / 2

    @classmethod
    def across(
        cls, start: float, extent: float, n_categories: int, n_clusters: int
    ) -> "ClusterLayout":
        return cls(
            start=start,
            category_width=extent / max(n_categories, 1),
            n_clusters=n_clusters,
        )


def point_x(index: int, count: int, plot: PlotRect) -> float:
    """x of the i-th point of a series spread across the plot width."""
    return plot.left + (index / ((count - 1) or 1)) * plot.width


def label_step(count: int, max_labels: int = 10) -> int:
    """Draw every n-th category label so at most ~max_labels are shown."""
    if count > max_labels:
        return math.ceil(count / max_labels)
    return 1
