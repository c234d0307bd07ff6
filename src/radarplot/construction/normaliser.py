"""Turn loosely structured item descriptors into :class:`Item` records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from radarplot._constants import UNTITLED_LABEL
from radarplot.model import Dimension, Item
from radarplot.source import ItemDescriptor

logger = logging.getLogger(__name__)


def _read(descriptor: Any, name: str, default: Any = None) -> Any:
    if isinstance(descriptor, Mapping):
        return descriptor.get(name, default)
    return getattr(descriptor, name, default)


def normalise_item(
    descriptor: ItemDescriptor | Mapping[str, Any],
    dimensions: Sequence[Dimension],
) -> Item:
    """Build an :class:`Item` from one descriptor.

    Missing or empty fields fall back to defaults instead of raising:
    the label becomes ``"Untitled"``, a missing value for a dimension
    becomes ``0``, and an empty colour means "no override".  Values that
    are not a mapping are logged and treated as empty.  Raw values
    are copied as given; numeric coercion happens in the geometry layer.

    Args:
        descriptor: An :class:`ItemDescriptor` or a mapping with the
            same keys (``label``, ``values``, ``disabled``, ``color``).
        dimensions: The chart's current dimensions.  Only their ids are
            looked up; values for unknown ids are dropped.

    Returns:
        A new :class:`Item`.
    """
    raw_values = _read(descriptor, "values") or {}
    if not isinstance(raw_values, Mapping):
        logger.warning("Ignoring non-mapping item values %r.", raw_values)
        raw_values = {}
    data = {dim.id: raw_values.get(dim.id, 0) for dim in dimensions}
    return Item(
        label=_read(descriptor, "label") or UNTITLED_LABEL,
        data=data,
        disabled=bool(_read(descriptor, "disabled", False)),
        color=_read(descriptor, "color") or None,
    )


def item_descriptors(children: Iterable[object]) -> list[object]:
    """Return the children that describe items, in order."""
    return [
        child for child in children
        if isinstance(child, (ItemDescriptor, Mapping))
    ]


def normalise_items(
    children: Iterable[object],
    dimensions: Sequence[Dimension],
) -> list[Item]:
    """Normalise every item descriptor among *children*."""
    return [
        normalise_item(descriptor, dimensions)
        for descriptor in item_descriptors(children)
    ]
