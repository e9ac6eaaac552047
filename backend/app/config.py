"""
Heatmap service configuration and constants.
"""

import os
from typing import NamedTuple


# Dataset source (monthly land-surface temperature variance, 1753-2015)
DEFAULT_DATASET_URL = (
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/"
    "master/global-temperature.json"
)
DATASET_URL = os.environ.get("HEATMAP_DATASET_URL", DEFAULT_DATASET_URL)

# Seconds before the dataset request is abandoned
FETCH_TIMEOUT = 10.0


class Margin(NamedTuple):
    top: float
    right: float
    bottom: float
    left: float


# Outer SVG size, plot area is what's left after the margins
CHART_WIDTH = 1200.0
CHART_HEIGHT = 600.0
CHART_MARGIN = Margin(top=50.0, right=50.0, bottom=100.0, left=100.0)

# Color ramp (matplotlib colormap name)
COLORMAP_NAME = "inferno"

# Year axis shows one tick per decade
YEAR_TICK_INTERVAL = 10

# Legend: fixed illustrative domain in °C, independent of the data extent
LEGEND_DOMAIN = (2.8, 13.0)
LEGEND_WIDTH = 300.0
LEGEND_HEIGHT = 20.0
LEGEND_STEPS = 12
LEGEND_TICKS = 5
LEGEND_OFFSET_FROM_BOTTOM = 40.0

# Tooltip overlay offset from the pointer (px)
TOOLTIP_OFFSET_X = 10.0
TOOLTIP_OFFSET_Y = -28.0

TITLE_TEXT = "Monthly Global Land-Surface Temperature"
TEMPERATURE_UNIT = "℃"
