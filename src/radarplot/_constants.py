"""Shared constants used across the model, geometry, and rendering layers."""

MAX_VALUE: float = 100.0
"""Data value that lands on the outer ring of the chart."""

FRAME_RADIUS: float = 99.0
"""Radius of the background frame circle in chart units."""

VIEWPORT_HALF_EXTENT: float = 100.0
"""Chart units span ``[-100, 100]`` on both axes."""

LABEL_SIDE_THRESHOLD: float = 20.0
"""Horizontal distance from the centre beyond which a label is side-anchored."""

DEFAULT_STEPS: int = 4
DEFAULT_SIZE: float = 250.0
LEGACY_SIZE: float = 200.0

UNTITLED_LABEL: str = "Untitled"
