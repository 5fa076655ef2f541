"""Visualization constants: colors, fonts and chart styling tokens."""

# Dashboard Theme
COLOR_GOLD = "#b4862e"
COLOR_TEXT_STRONG = "#1e293b"
COLOR_TEXT_LABEL = "#334155"
COLOR_TEXT_AXIS = "#475569"
COLOR_TEXT_MUTED = "#64748b"
COLOR_TEXT_FAINT = "#94a3b8"
COLOR_GRID = "#e2e8f0"
COLOR_GRID_SOFT = "rgba(0,0,0,0.05)"
COLOR_WHITE = "#fff"
COLOR_CUMULATIVE = "#ef4444"
COLOR_AREA_FILL = "rgba(180,134,46,0.12)"

# Chart Palette (cycled by index)
CHART_COLORS = [
    COLOR_GOLD,
    "#059669",
    "#2563eb",
    "#dc2626",
    "#7c3aed",
    "#0891b2",
    "#c2410c",
    "#4f46e5",
    "#be185d",
    "#065f46",
]

# Aging buckets, youngest to oldest: green, blue, amber, red, dark red, slate
AGING_COLORS = [
    "#059669",
    "#2563eb",
    "#d97706",
    "#ef4444",
    "#b91c1c",
    "#64748b",
]

# Cash flow series
LINE_COLORS = {
    "actual": COLOR_GOLD,
    "projected": "#60a5fa",
    "budget": COLOR_TEXT_FAINT,
}
CASH_FLOW_ACTUAL_FILL = "rgba(180,134,46,0.08)"

FONT_FAMILY = "sans-serif"
ELLIPSIS = "…"
