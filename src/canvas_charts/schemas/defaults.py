"""Default parameter values for the charting engine.

These constants are used as `Field(default=...)` values in the Pydantic
settings schema.  They live here (in the schemas layer) rather than in
`core/` so that `schemas` does not depend on `core`.

All lengths are in CANVAS PIXELS.
"""

# =============================================================================
# POINTER HIT-TESTING
# =============================================================================
# Points match on |dx| < radius AND |dy| < radius (a square, not a circle).
DEFAULT_HIT_RADIUS = 15.0
DEFAULT_TOOLTIP_POINT_OFFSET = 10.0
DEFAULT_NEAREST_X_RADIUS = 30.0

# =============================================================================
# DATA TRUNCATION (max rows drawn per chart type)
# =============================================================================
DEFAULT_MAX_ITEMS = {
    "horizontal_bar_chart": 25,
    "vertical_bar_chart": 15,
    "stacked_bar_chart": 15,
    "pareto_chart": 15,
    "pie_chart": 8,
    "clustered_bar_chart": 10,
    "funnel_chart": 8,
    "line_chart": 60,
    "area_chart": 60,
}
DEFAULT_MAX_ITEMS_FALLBACK = 15
DEFAULT_PIE_MAX_SLICES = 8

# =============================================================================
# LABEL BUDGETS (characters before the ellipsis)
# =============================================================================
DEFAULT_HORIZONTAL_LABEL_CHARS = 18
DEFAULT_VERTICAL_MIN_LABEL_CHARS = 8
DEFAULT_LINE_LABEL_CHARS = 10
DEFAULT_PARETO_LABEL_CHARS = 12
DEFAULT_CLUSTER_LABEL_CHARS = 10
DEFAULT_FUNNEL_LABEL_CHARS = 20
DEFAULT_PIE_LEGEND_CHARS = 22

# =============================================================================
# CANVAS
# =============================================================================
DEFAULT_CANVAS_WIDTH = 600
DEFAULT_CANVAS_HEIGHT = 270
DEFAULT_GRID_LINE_WIDTH = 0.5
DEFAULT_GRID_INTERVALS = 4
