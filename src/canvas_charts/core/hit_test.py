"""Pointer hit-testing against the shapes of the last render.

Points match inside a square of +/- radius around their centre (both axes
tested independently, not a Euclidean distance). Bars and slices match
inside their box, edges included. Elements are scanned in draw order and
the first match wins.
"""

from typing import Sequence

from canvas_charts.schemas import ElementKind, HitTestElement, TooltipState
from canvas_charts.schemas.defaults import (
    DEFAULT_HIT_RADIUS,
    DEFAULT_TOOLTIP_POINT_OFFSET,
)


def contains(
    element: HitTestElement, x: float, y: float, radius: float = DEFAULT_HIT_RADIUS
) -> bool:
    """Whether the pointer at (x, y) is over `element`."""
    if element.kind == ElementKind.POINT:
        return abs(element.x - x) < radius and abs(element.y - y) < radius
    return (
        element.x <= x <= element.x + element.width
        and element.y <= y <= element.y + element.height
    )


def locate(
    x: float,
    y: float,
    elements: Sequence[HitTestElement],
    radius: float = DEFAULT_HIT_RADIUS,
) -> HitTestElement | None:
    """First element under the pointer, in draw order."""
    return next((el for el in elements if contains(el, x, y, radius)), None)


def tooltip_for(
    element: HitTestElement | None,
    point_offset: float = DEFAULT_TOOLTIP_POINT_OFFSET,
) -> TooltipState:
    """Tooltip anchored on a matched element, or the hidden tooltip.

    Points anchor just above their centre; bars and slices anchor at the
    horizontal centre of their top edge.
    """
    if element is None:
        return TooltipState.hidden()
    if element.kind == ElementKind.POINT:
        x, y = element.x, element.y - point_offset
    else:
        x, y = element.x + element.width / 2, element.y
    return TooltipState(
        visible=True,
        x=x,
        y=y,
        label=element.label,
        formatted_value=element.formatted_value,
        detail=element.detail,
    )


def nearest_by_x(
    x: float, anchors: Sequence[float], max_distance: float
) -> int | None:
    """Index of the anchor closest to x horizontally, if within max_distance."""
    best_index = None
    best_distance = float("inf")
    for index, anchor in enumerate(anchors):
        distance = abs(anchor - x)
        if distance < best_distance:
            best_index, best_distance = index, distance
    if best_index is None or best_distance >= max_distance:
        return None
    return best_index
