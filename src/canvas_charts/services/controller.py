"""Chart controller: owns one surface, its hit-test index and tooltip state.

A host creates one controller per chart on screen, calls `render` when the
data, config or type changes and forwards pointer events. The controller
keeps only the last render inputs (for `resize`), the hit-test elements of
the last render and the current tooltip.
"""

import logging
from typing import Any, Callable, Sequence

import pandas as pd

from canvas_charts.core.hit_test import locate, tooltip_for
from canvas_charts.schemas import (
    CanvasSize,
    ChartConfig,
    ChartType,
    EngineSettings,
    HitTestElement,
    RenderResult,
    TooltipState,
)
from canvas_charts.services.engine import render_chart
from canvas_charts.surfaces import DrawingSurface, RecordingSurface

logger = logging.getLogger(__name__)

HoverCallback = Callable[[TooltipState], None]
ClickCallback = Callable[[HitTestElement], None]


class ChartController:
    """Interactive wrapper around `render_chart`.

    Attributes:
        surface: Surface every render draws on.
        settings: Styling and interaction settings.
        elements: Hit-test elements of the last render, in draw order.
        tooltip: Current tooltip state.
        last_result: RenderResult of the last render, if any.
    """

    def __init__(
        self,
        surface: DrawingSurface | None = None,
        settings: EngineSettings | None = None,
        on_hover: HoverCallback | None = None,
        on_element_click: ClickCallback | None = None,
    ) -> None:
        self.surface = surface if surface is not None else RecordingSurface()
        self.settings = settings or EngineSettings()
        self.on_hover = on_hover
        self.on_element_click = on_element_click

        self.elements: list[HitTestElement] = []
        self.tooltip = TooltipState.hidden()
        self.last_result: RenderResult | None = None
        self._last_inputs: dict[str, Any] | None = None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        dataset: "Sequence[dict[str, Any]] | pd.DataFrame | None",
        chart_config: ChartConfig | dict | None = None,
        chart_type: ChartType | str | None = ChartType.VERTICAL_BAR,
        title: str | None = None,
        canvas_size: CanvasSize | None = None,
    ) -> list[HitTestElement]:
        """Redraw the chart and replace the hit-test index.

        Any visible tooltip is hidden, since it points into the old layout.
        """
        self._last_inputs = {
            "dataset": dataset,
            "chart_config": chart_config,
            "chart_type": chart_type,
            "title": title,
        }
        return self._draw(canvas_size)

    def resize(self, width: float, height: float) -> list[HitTestElement]:
        """Resize the surface and redraw with the last inputs."""
        size = CanvasSize(width=width, height=height)
        if self._last_inputs is None:
            self.surface.resize(size.width, size.height)
            return []
        return self._draw(size)

    def _draw(self, canvas_size: CanvasSize | None) -> list[HitTestElement]:
        result = render_chart(
            self.surface,
            canvas_size=canvas_size,
            settings=self.settings,
            **self._last_inputs,
        )
        return self._publish(result)

    def _publish(self, result: RenderResult) -> list[HitTestElement]:
        self.last_result = result
        self.elements = list(result.elements)
        if self.tooltip.visible:
            self._set_tooltip(TooltipState.hidden())
        return self.elements

    def _fit_surface(self, canvas_size: CanvasSize | None) -> None:
        """Resize the surface to a requested size, if any, then clear it."""
        if canvas_size is not None and (canvas_size.width, canvas_size.height) != (
            self.surface.width,
            self.surface.height,
        ):
            self.surface.resize(canvas_size.width, canvas_size.height)
        self.surface.clear()

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def hit(self, x: float, y: float) -> HitTestElement | None:
        """Element under the pointer, or None."""
        return locate(x, y, self.elements, self.settings.hit_radius)

    def pointer_move(self, x: float, y: float) -> TooltipState:
        """Update the tooltip for a pointer at canvas coordinates (x, y)."""
        element = self.hit(x, y)
        self._set_tooltip(tooltip_for(element, self.settings.tooltip_point_offset))
        return self.tooltip

    def pointer_leave(self) -> TooltipState:
        """Hide the tooltip."""
        self._set_tooltip(TooltipState.hidden())
        return self.tooltip

    def click(self, x: float, y: float) -> HitTestElement | None:
        """Report the clicked element to `on_element_click` (drill-through)."""
        element = self.hit(x, y)
        if element is not None and self.on_element_click is not None:
            logger.debug(f"Element clicked: {element.label!r}")
            self.on_element_click(element)
        return element

    def _set_tooltip(self, tooltip: TooltipState) -> None:
        self.tooltip = tooltip
        if self.on_hover is not None:
            self.on_hover(tooltip)
