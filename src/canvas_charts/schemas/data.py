"""Render output schemas: hit-test geometry and tooltip state."""

from pydantic import BaseModel, ConfigDict, Field

from .chart_type import ElementKind


class HitTestElement(BaseModel):
    """A drawn shape that can be found again under the pointer.

    Points store their centre in (x, y) with zero width/height.
    Bars and slices store the top-left corner and size of their box.
    """

    kind: ElementKind
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    label: str = ""
    formatted_value: str = ""
    detail: str | None = Field(None, description="Optional second tooltip line")

    model_config = ConfigDict(frozen=True)


class TooltipLine(BaseModel):
    """One styled line of a multi-line tooltip."""

    text: str
    color: str | None = None
    bold: bool = False

    model_config = ConfigDict(frozen=True)


class TooltipState(BaseModel):
    """Floating label state for the host UI, rebuilt on every pointer event."""

    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    label: str = ""
    formatted_value: str = ""
    detail: str | None = None
    lines: list[TooltipLine] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def hidden(cls) -> "TooltipState":
        """The cleared tooltip."""
        return cls()


class PreparedData(BaseModel):
    """Rows actually drawn after per-chart-type truncation."""

    rows: list[dict] = Field(default_factory=list)
    total_count: int = 0
    is_truncated: bool = False

    model_config = ConfigDict(frozen=True)


class RenderResult(BaseModel):
    """Everything a single render produced, apart from the pixels."""

    chart_type: str
    elements: list[HitTestElement] = Field(default_factory=list)
    drawn_count: int = 0
    total_count: int = 0
    is_truncated: bool = False
    canvas_width: float = 0.0
    canvas_height: float = 0.0

    model_config = ConfigDict(frozen=True)
