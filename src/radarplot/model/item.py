from __future__ import annotations

from dataclasses import dataclass, field

from radarplot._constants import UNTITLED_LABEL

#: A raw per-dimension value as supplied by an item descriptor.  Strings
#: are kept as-is and coerced to a number only when geometry is built.
RawValue = str | float | int


@dataclass
class Item:
    """One data layer plotted across every dimension of a chart.

    Items carry no identity beyond their position in the chart's item
    list; the whole list is rebuilt whenever the item source changes.

    Attributes:
        label: Display name of the layer.
        data: Raw value per dimension id.  Values may be numbers or
            numeric strings; anything non-numeric plots as ``0``.
        disabled: Whether the layer is hidden by the renderer.  Disabled
            items still get a polygon so they can be toggled without
            recomputing geometry.
        color: Optional colour override (any matplotlib colour string).
    """

    label: str = UNTITLED_LABEL
    data: dict[str, RawValue] = field(default_factory=dict)
    disabled: bool = False
    color: str | None = None
