from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields

from radarplot._constants import DEFAULT_SIZE, DEFAULT_STEPS, LEGACY_SIZE


@dataclass
class ChartConfig:
    """Display configuration for a radar chart.

    Attributes:
        steps: Number of concentric reference polygons.  The last one is
            the outer guide.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Raises:
        ValueError: If *steps* is not a positive integer or either canvas
            dimension is not a positive finite number.
    """

    steps: int = DEFAULT_STEPS
    width: float = DEFAULT_SIZE
    height: float = DEFAULT_SIZE

    def __post_init__(self) -> None:
        if (
            isinstance(self.steps, bool)
            or not isinstance(self.steps, numbers.Real)
            or not math.isfinite(self.steps)
            or int(self.steps) != self.steps
        ):
            raise ValueError(f"steps must be an integer, got {self.steps!r}")
        self.steps = int(self.steps)
        if self.steps < 1:
            raise ValueError(f"steps must be at least 1, got {self.steps}")
        for name in ("width", "height"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
            setattr(self, name, value)

    @classmethod
    def legacy(cls) -> ChartConfig:
        """Return the fixed 200x200 layout of the original widget."""
        return cls(width=LEGACY_SIZE, height=LEGACY_SIZE)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Only fields that differ from their defaults are included.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) != f.default
        }

    @classmethod
    def from_dict(cls, d: dict) -> ChartConfig:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        unknown = set(d) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"unknown chart config keys: {sorted(unknown)}")
        return cls(**d)
