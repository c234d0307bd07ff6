"""Keep a :class:`ChartStore` in step with external configuration and items.

Two kinds of events reach the synchronizer:

- Attribute changes, as ``(name, old_value, new_value)`` triples for
  ``dimensions``, ``steps``, ``width``, ``height``, or ``size``.
- Batches of :class:`MutationRecord` from the observed
  :class:`ChildCollection`.  Any ``childList`` or ``attributes`` record
  in a batch triggers one full rescan of the collection.

Bad input never raises: it is logged and the previous value is kept.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from radarplot.construction.normaliser import normalise_items
from radarplot.model import ChartConfig
from radarplot.parser import apply_dimensions
from radarplot.source import ChildCollection, MutationRecord
from radarplot.store import ChartStore

logger = logging.getLogger(__name__)

OBSERVED_ATTRIBUTES = ("dimensions", "steps", "width", "height", "size")

_RESCAN_KINDS = frozenset({"childList", "attributes"})


def parse_number(text: str | float | None) -> float | None:
    """Parse an attribute value as a finite number, or return ``None``."""
    if text is None or isinstance(text, bool):
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


class ChangeSynchronizer:
    """Translate external change notifications into store writes.

    Args:
        store: The store to keep up to date.
        defaults: Configuration used when a size attribute is removed.
    """

    def __init__(
        self,
        store: ChartStore,
        defaults: ChartConfig | None = None,
    ) -> None:
        self.store = store
        self.defaults = defaults if defaults is not None else ChartConfig()
        self._source: ChildCollection | None = None
        self._handle: int | None = None

    # -- Item source -------------------------------------------------------

    @property
    def source(self) -> ChildCollection | None:
        """The collection currently observed, or ``None`` when detached."""
        return self._source

    @property
    def attached(self) -> bool:
        return self._source is not None

    def attach(self, source: ChildCollection) -> None:
        """Populate items from *source* and start observing it.

        Attaching to a new source while attached detaches from the old
        one first.
        """
        if self._source is not None:
            self.detach()
        self._source = source
        self.rescan()
        self._handle = source.observe(self.handle_mutations)
        logger.debug("Attached to item source with %d children.", len(source))

    def detach(self) -> None:
        """Stop observing the current source.  A no-op when detached."""
        if self._source is None:
            return
        if self._handle is not None:
            self._source.disconnect(self._handle)
        self._source = None
        self._handle = None
        logger.debug("Detached from item source.")

    def handle_mutations(self, records: Iterable[MutationRecord]) -> bool:
        """Process one batch of mutation records.

        Returns:
            ``True`` if the batch triggered a rescan.
        """
        if not any(record.kind in _RESCAN_KINDS for record in records):
            return False
        self.rescan()
        return True

    def rescan(self) -> None:
        """Rebuild the item list from every descriptor in the source.

        With no source attached the item list becomes empty.
        """
        children = list(self._source) if self._source is not None else []
        items = normalise_items(children, self.store.dimensions)
        logger.debug("Rescanned %d item(s).", len(items))
        self.store.items = items

    # -- Attributes --------------------------------------------------------

    def attribute_changed(
        self,
        name: str,
        old_value: str | None,
        new_value: str | None,
    ) -> None:
        """Apply a change to one configuration attribute.

        Changes where *old_value* equals *new_value*, and unknown
        attribute names, are ignored.
        """
        if old_value == new_value:
            return
        if name == "dimensions":
            self._update_dimensions(new_value)
        elif name == "steps":
            self._update_steps(new_value)
        elif name in ("width", "height"):
            self._update_size((name,), new_value)
        elif name == "size":
            self._update_size(("width", "height"), new_value)
        else:
            logger.debug("Ignoring unobserved attribute %r.", name)

    def _update_dimensions(self, value: str | None) -> None:
        current = self.store.dimensions
        dimensions = apply_dimensions(current, value)
        if tuple(dimensions) == current:
            return
        if self._source is None:
            self.store.dimensions = dimensions
            return
        # Items only carry values for known ids, so re-read them too.
        items = normalise_items(list(self._source), dimensions)
        self.store.update(dimensions=dimensions, items=items)

    def _update_steps(self, value: str | None) -> None:
        number = parse_number(value)
        if not number:
            logger.debug("Ignoring non-numeric or zero steps %r.", value)
            return
        steps = int(number)
        if steps < 1:
            logger.debug("Ignoring steps %r: must be at least 1.", value)
            return
        self.store.steps = steps

    def _update_size(self, names: tuple[str, ...], value: str | None) -> None:
        if value is None or not str(value).strip():
            self.store.update(**{n: getattr(self.defaults, n) for n in names})
            return
        number = parse_number(value)
        if number is None or number <= 0:
            logger.debug("Ignoring invalid %s %r.", "/".join(names), value)
            return
        self.store.update(**{n: number for n in names})
