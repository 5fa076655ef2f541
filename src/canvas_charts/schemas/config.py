"""Configuration schemas for the charting engine."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from canvas_charts.constants import CHART_COLORS, FONT_FAMILY
from canvas_charts.schemas.defaults import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_CLUSTER_LABEL_CHARS,
    DEFAULT_FUNNEL_LABEL_CHARS,
    DEFAULT_GRID_INTERVALS,
    DEFAULT_GRID_LINE_WIDTH,
    DEFAULT_HIT_RADIUS,
    DEFAULT_HORIZONTAL_LABEL_CHARS,
    DEFAULT_LINE_LABEL_CHARS,
    DEFAULT_MAX_ITEMS,
    DEFAULT_MAX_ITEMS_FALLBACK,
    DEFAULT_NEAREST_X_RADIUS,
    DEFAULT_PARETO_LABEL_CHARS,
    DEFAULT_PIE_LEGEND_CHARS,
    DEFAULT_PIE_MAX_SLICES,
    DEFAULT_TOOLTIP_POINT_OFFSET,
    DEFAULT_VERTICAL_MIN_LABEL_CHARS,
)

# ---------------------------------------------------------------------------
# UI metadata helpers, attached to each Field via json_schema_extra.
# Keys:
#   ui_group  – settings panel heading
#   ui_label  – human-readable control label
#   ui_format – rendering hint (px | int | color | list)
# ---------------------------------------------------------------------------


def _ui(group: str, label: str, fmt: str = "int") -> dict:
    """Build json_schema_extra dict for a settings field."""
    return {"ui_group": group, "ui_label": label, "ui_format": fmt}


class ChartConfig(BaseModel):
    """Column-role configuration handed over with every dataset.

    Every field is optional; missing roles are filled in by the
    ColumnResolver. Unknown keys coming from upstream payloads are ignored.
    """

    x_axis_col_name: str | None = None
    y_axis_col_name: str | list[str] | None = None
    category_col_name: str | None = None
    value_col_name: str | None = None
    cluster_by: str | None = None
    stages_col_name: str | None = None
    cumulative_line: str | None = None
    title: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _loosen(cls, value: Any, info: ValidationInfo) -> Any:
        # Upstream payloads send numbers, empty strings and tuples here.
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            names = [str(v) for v in value if v is not None and str(v) != ""]
            if info.field_name != "y_axis_col_name":
                return names[0] if names else None
            return names or None
        text = str(value)
        return text if text != "" else None

    @property
    def y_axis_column(self) -> str | None:
        """First configured y-axis column (lists use their first entry)."""
        if isinstance(self.y_axis_col_name, list):
            return self.y_axis_col_name[0] if self.y_axis_col_name else None
        return self.y_axis_col_name

    @classmethod
    def coerce(cls, value: "ChartConfig | dict | None") -> "ChartConfig":
        """Accept a ChartConfig, a plain dict or None."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls()
        return cls.model_validate(dict(value))


class CanvasSize(BaseModel):
    """Pixel size of the drawing surface."""

    width: float = Field(DEFAULT_CANVAS_WIDTH, ge=0)
    height: float = Field(DEFAULT_CANVAS_HEIGHT, ge=0)

    model_config = ConfigDict(frozen=True)


class EngineSettings(BaseModel):
    """Styling and interaction settings shared by every renderer."""

    palette: list[str] = Field(
        default_factory=lambda: list(CHART_COLORS),
        min_length=1,
        description="Series colors, cycled by index",
        json_schema_extra=_ui("Style", "Palette", "list"),
    )
    font_family: str = Field(
        FONT_FAMILY,
        description="CSS-style font family used for every label",
        json_schema_extra=_ui("Style", "Font Family", "text"),
    )
    grid_line_width: float = Field(
        DEFAULT_GRID_LINE_WIDTH,
        gt=0,
        description="Stroke width of value-axis gridlines",
        json_schema_extra=_ui("Style", "Grid Width", "px"),
    )
    grid_intervals: int = Field(
        DEFAULT_GRID_INTERVALS,
        ge=1,
        description="Number of equal value-axis intervals",
        json_schema_extra=_ui("Style", "Grid Intervals"),
    )
    hit_radius: float = Field(
        DEFAULT_HIT_RADIUS,
        gt=0,
        description="Half-size of the square hit target around points",
        json_schema_extra=_ui("Interaction", "Point Hit Radius", "px"),
    )
    tooltip_point_offset: float = Field(
        DEFAULT_TOOLTIP_POINT_OFFSET,
        ge=0,
        description="Tooltip lift above a hovered point",
        json_schema_extra=_ui("Interaction", "Tooltip Offset", "px"),
    )
    nearest_x_radius: float = Field(
        DEFAULT_NEAREST_X_RADIUS,
        gt=0,
        description="Max horizontal distance for nearest-point lookup",
        json_schema_extra=_ui("Interaction", "Nearest X Radius", "px"),
    )
    max_items: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_MAX_ITEMS),
        description="Rows drawn per chart type before truncation",
        json_schema_extra=_ui("Data", "Max Items"),
    )
    max_items_fallback: int = Field(
        DEFAULT_MAX_ITEMS_FALLBACK,
        ge=1,
        json_schema_extra=_ui("Data", "Max Items (Other)"),
    )
    pie_max_slices: int = Field(
        DEFAULT_PIE_MAX_SLICES,
        ge=2,
        description="Slices beyond this are folded into 'Others'",
        json_schema_extra=_ui("Data", "Pie Max Slices"),
    )
    horizontal_label_chars: int = Field(
        DEFAULT_HORIZONTAL_LABEL_CHARS,
        ge=2,
        json_schema_extra=_ui("Labels", "Horizontal Bar Label"),
    )
    vertical_min_label_chars: int = Field(
        DEFAULT_VERTICAL_MIN_LABEL_CHARS,
        ge=2,
        json_schema_extra=_ui("Labels", "Vertical Bar Label (min)"),
    )
    line_label_chars: int = Field(
        DEFAULT_LINE_LABEL_CHARS,
        ge=2,
        json_schema_extra=_ui("Labels", "Line Label"),
    )
    pareto_label_chars: int = Field(
        DEFAULT_PARETO_LABEL_CHARS,
        ge=2,
        json_schema_extra=_ui("Labels", "Pareto Label"),
    )
    cluster_label_chars: int = Field(
        DEFAULT_CLUSTER_LABEL_CHARS,
        ge=1,
        json_schema_extra=_ui("Labels", "Cluster Label"),
    )
    funnel_label_chars: int = Field(
        DEFAULT_FUNNEL_LABEL_CHARS,
        ge=1,
        json_schema_extra=_ui("Labels", "Funnel Label"),
    )
    pie_legend_chars: int = Field(
        DEFAULT_PIE_LEGEND_CHARS,
        ge=1,
        json_schema_extra=_ui("Labels", "Pie Legend Label"),
    )

    model_config = ConfigDict(frozen=True)

    def color_for(self, index: int) -> str:
        """Palette color for the i-th series element."""
        return self.palette[index % len(self.palette)]

    def font(self, size: int, weight: str | None = None) -> str:
        """Build a canvas font string, e.g. 'bold 11px sans-serif'."""
        prefix = f"{weight} " if weight else ""
        return f"{prefix}{size}px {self.font_family}"

    def max_items_for(self, chart_type: str) -> int:
        """Truncation limit for a chart type tag."""
        key = getattr(chart_type, "value", chart_type)
        return self.max_items.get(key, self.max_items_fallback)
