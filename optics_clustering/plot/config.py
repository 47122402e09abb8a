"""Configuration constants for reachability plot styling."""

from __future__ import annotations

OUTLIER_BAR_COLOR = "#8A8A8A"
UNDEFINED_BAR_COLOR = "#32CD32"
BORDER_LINE_COLOR = "#FF00FF"
THRESHOLD_LINE_COLOR = "#1F3FFF"

BAR_STYLE = {
    "width": 1.0,
    "linewidth": 0.0,
    "align": "edge",
}

BORDER_LINE_STYLE = {
    "color": BORDER_LINE_COLOR,
    "linewidth": 1.0,
    "linestyle": "solid",
    "alpha": 0.9,
}

THRESHOLD_LINE_STYLE = {
    "color": THRESHOLD_LINE_COLOR,
    "linewidth": 1.0,
    "linestyle": "dashed",
    "alpha": 0.9,
}

# Undefined bars are drawn this much above the tallest finite bar.
UNDEFINED_HEIGHT_FACTOR = 1.05
