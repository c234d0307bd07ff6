from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimension:
    """One labelled axis of a radar chart.

    Attributes:
        id: Key used to look up each item's value for this axis.
        label: Text shown at the outer end of the axis.
    """

    id: str
    label: str

    def to_spec(self) -> str:
        """Return the ``id:label`` form understood by the dimension parser."""
        return f"{self.id}:{self.label}"
