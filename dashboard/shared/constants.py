"""Shared constants for the weather dashboard."""

from __future__ import annotations

TEMP_COLOR = "#FF8700"
HUMIDITY_COLOR = "#00D2BE"

# Forecast cards skip the point nearest to now and show the next five.
FORECAST_CARD_SLICE = slice(1, 6)

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)
