"""Fixed drawing constants for the slider surface."""
from __future__ import annotations

SURFACE_WIDTH = 400
SURFACE_HEIGHT = 400

STROKE_WIDTH = 20
HANDLE_RADIUS = 13
DASH_GAP = 1.0

# A closed 360 degree arc has coincident end points; back the end off by this.
ARC_EPSILON_DEGREES = 0.01

# The surface is rotated so that angle zero points straight up.
VIEW_ROTATION_DEGREES = -90.0

BACKGROUND_STROKE_COLOR = "#cecfd1"
HANDLE_FILL_COLOR = "#f0f0f0"
HANDLE_STROKE_COLOR = BACKGROUND_STROKE_COLOR

DEFAULT_MIN = 0
DEFAULT_MAX = 10
DEFAULT_STEP = 1
DEFAULT_RADIUS = 50
DEFAULT_READOUT_SYMBOL = "$"
