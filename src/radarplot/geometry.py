"""Polar layout of radar chart values.

Dimension *i* of *n* sits at ``360 / n * (i + 1)`` degrees, measured
from the positive x axis towards positive y.  Coordinates are in chart
units where a value of ``100`` reaches the outer ring, with y growing
downwards as on a screen canvas.  Axis lines and data points both go
through :func:`coords`, so they stay aligned for any dimension count.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

import numpy as np

from radarplot._constants import LABEL_SIDE_THRESHOLD

LabelSide = Literal["left", "right", "center"]


def to_number(raw: object) -> float:
    """Coerce a raw item value to a float.

    Numbers pass through and numeric strings (surrounding whitespace
    allowed) are parsed.  ``None``, booleans, blank strings, non-numeric
    strings, NaN, and infinities all become ``0.0``.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def dimension_angle(dim_index: int, dim_count: int) -> float:
    """Angle of dimension *dim_index* in radians."""
    return math.radians(360.0 / dim_count * (dim_index + 1))


def coords(value: float, dim_index: int, dim_count: int) -> tuple[float, float]:
    """Map *value* on dimension *dim_index* to Cartesian chart coordinates.

    Args:
        value: Distance from the centre (``100`` is the outer ring).
        dim_index: Zero-based position of the dimension.
        dim_count: Total number of dimensions (must be positive).

    Returns:
        ``(x, y)`` in chart units.
    """
    angle = dimension_angle(dim_index, dim_count)
    return (math.cos(angle) * value, math.sin(angle) * value)


def polygon_points(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Vectorised :func:`coords` for one value per dimension.

    Args:
        values: One value per dimension, in dimension order.  The
            dimension count is ``len(values)``.

    Returns:
        Array of shape ``(n, 2)``.  Empty input gives shape ``(0, 2)``.
    """
    values = np.asarray(values, dtype=float)
    n = len(values)
    if n == 0:
        return np.empty((0, 2))
    angles = np.radians(360.0 / n * (np.arange(n) + 1))
    return np.column_stack([np.cos(angles) * values, np.sin(angles) * values])


def label_side(value: float, dim_index: int, dim_count: int) -> LabelSide:
    """Classify where a label at *value* on a dimension should be anchored.

    Returns ``"left"`` when the point lies more than 20 units left of the
    centre, ``"right"`` when more than 20 units right, and ``"center"``
    otherwise.
    """
    x, _ = coords(value, dim_index, dim_count)
    if x < -LABEL_SIDE_THRESHOLD:
        return "left"
    if x > LABEL_SIDE_THRESHOLD:
        return "right"
    return "center"
