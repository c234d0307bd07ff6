"""Observable item source: child descriptors and mutation batches.

A :class:`ChildCollection` plays the part of the chart's child nodes.
It holds :class:`ItemDescriptor` objects (and, possibly, unrelated
children that the chart ignores) and tells its observers about every
structural or attribute change as a list of :class:`MutationRecord`.

Example usage::

    items = ChildCollection()
    handle = items.observe(lambda records: print(len(records)))

    with items.batch():
        items.append(ItemDescriptor("A", {"x": 10}))
        items.append(ItemDescriptor("B", {"x": 30}))
    # One delivery containing two records.

    items.disconnect(handle)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Literal

from radarplot.model.item import RawValue

logger = logging.getLogger(__name__)

MutationKind = Literal["childList", "attributes", "characterData"]

#: Descriptor fields whose assignment is reported as an attribute mutation.
_OBSERVED_FIELDS = frozenset({"label", "disabled", "color", "values"})


@dataclass
class MutationRecord:
    """A single change to a :class:`ChildCollection` or one of its children.

    Attributes:
        kind: ``"childList"`` for additions and removals, ``"attributes"``
            for edits to a child.  Other kinds may be produced by foreign
            sources and are ignored by the chart.
        target: The child that changed, or the collection itself for
            ``"childList"`` records.
        attribute_name: Name of the changed attribute for
            ``"attributes"`` records; per-dimension values are reported
            as ``"data-<id>"``.
    """

    kind: MutationKind | str
    target: Any = None
    attribute_name: str | None = None


@dataclass
class ItemDescriptor:
    """Loosely structured description of one chart item.

    Every field is optional; the chart fills in defaults when it
    normalises the descriptor.  Assigning to ``label``, ``disabled``,
    ``color``, or ``values``, or calling :meth:`set_value` /
    :meth:`remove_value`, notifies the owning collection.  Editing the
    ``values`` dict in place does not.

    Attributes:
        label: Display name; empty or ``None`` becomes ``"Untitled"``.
        values: Raw value per dimension id.
        disabled: Presence flag hiding the item.
        color: Optional colour override.
    """

    label: str | None = None
    values: dict[str, RawValue] = field(default_factory=dict)
    disabled: bool = False
    color: str | None = None
    _owner: ChildCollection | None = field(
        default=None, init=False, repr=False, compare=False,
    )

    def __setattr__(self, name: str, value: object) -> None:
        super().__setattr__(name, value)
        if name in _OBSERVED_FIELDS:
            owner = self.__dict__.get("_owner")
            if owner is not None:
                owner._record("attributes", self, name)

    def set_value(self, dimension_id: str, value: RawValue) -> None:
        """Set the raw value for *dimension_id*."""
        self.values[dimension_id] = value
        self._notify_value(dimension_id)

    def remove_value(self, dimension_id: str) -> None:
        """Drop the value for *dimension_id*; it will plot as ``0``."""
        if dimension_id in self.values:
            del self.values[dimension_id]
            self._notify_value(dimension_id)

    def _notify_value(self, dimension_id: str) -> None:
        if self._owner is not None:
            self._owner._record("attributes", self, f"data-{dimension_id}")

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary, omitting unset fields."""
        d: dict = {}
        if self.label:
            d["label"] = self.label
        if self.values:
            d["values"] = dict(self.values)
        if self.disabled:
            d["disabled"] = True
        if self.color:
            d["color"] = self.color
        return d

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> ItemDescriptor:
        """Deserialise from a dictionary.

        Missing keys take their defaults.  A ``values`` entry that is not
        a mapping is logged and replaced by an empty one.
        """
        values = d.get("values") or {}
        if not isinstance(values, Mapping):
            logger.warning("Ignoring non-mapping item values %r.", values)
            values = {}
        return cls(
            label=d.get("label"),
            values=dict(values),
            disabled=bool(d.get("disabled", False)),
            color=d.get("color"),
        )


MutationCallback = Callable[[list[MutationRecord]], None]


class ChildCollection:
    """Ordered, observable collection of chart children.

    Each mutation is delivered to observers as its own single-record
    batch, unless it happens inside :meth:`batch`, in which case all
    records are delivered together when the outermost ``batch`` block
    exits.
    """

    def __init__(self, children: Iterable[object] = ()) -> None:
        self._children: list[object] = []
        self._observers: dict[int, MutationCallback] = {}
        self._next_handle = 0
        self._batch_depth = 0
        self._pending: list[MutationRecord] = []
        for child in children:
            self._adopt(child)
            self._children.append(child)

    def __iter__(self) -> Iterator[object]:
        return iter(list(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, index: int) -> object:
        return self._children[index]

    def __contains__(self, child: object) -> bool:
        return any(c is child for c in self._children)

    # -- Structure ---------------------------------------------------------

    def append(self, child: object) -> None:
        """Add *child* at the end of the collection."""
        self.insert(len(self._children), child)

    def insert(self, index: int, child: object) -> None:
        """Insert *child* before position *index*.

        An :class:`ItemDescriptor` already owned by another collection
        is moved out of it first.
        """
        self._adopt(child)
        self._children.insert(index, child)
        self._record("childList", self)

    def remove(self, child: object) -> None:
        """Remove *child*.

        Raises:
            ValueError: If *child* is not in the collection.
        """
        for i, c in enumerate(self._children):
            if c is child:
                del self._children[i]
                break
        else:
            raise ValueError("child is not in this collection")
        if isinstance(child, ItemDescriptor):
            object.__setattr__(child, "_owner", None)
        self._record("childList", self)

    def clear(self) -> None:
        """Remove every child in a single mutation."""
        if not self._children:
            return
        for child in self._children:
            if isinstance(child, ItemDescriptor):
                object.__setattr__(child, "_owner", None)
        self._children.clear()
        self._record("childList", self)

    def _adopt(self, child: object) -> None:
        if not isinstance(child, ItemDescriptor):
            return
        if child._owner is not None and child._owner is not self:
            child._owner.remove(child)
        elif child._owner is self:
            raise ValueError("descriptor is already in this collection")
        object.__setattr__(child, "_owner", self)

    # -- Observation -------------------------------------------------------

    def observe(self, callback: MutationCallback) -> int:
        """Register *callback* for mutation batches.

        Returns:
            A handle to pass to :meth:`disconnect`.
        """
        handle = self._next_handle
        self._next_handle += 1
        self._observers[handle] = callback
        return handle

    def disconnect(self, handle: int) -> None:
        """Stop delivering batches to the observer behind *handle*."""
        self._observers.pop(handle, None)

    @property
    def observer_count(self) -> int:
        """Number of currently registered observers."""
        return len(self._observers)

    @contextmanager
    def batch(self) -> Iterator[ChildCollection]:
        """Group every mutation inside the block into one delivery."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._pending:
                records, self._pending = self._pending, []
                self._deliver(records)

    def _record(
        self,
        kind: MutationKind,
        target: object,
        attribute_name: str | None = None,
    ) -> None:
        record = MutationRecord(kind, target, attribute_name)
        if self._batch_depth:
            self._pending.append(record)
        else:
            self._deliver([record])

    def _deliver(self, records: list[MutationRecord]) -> None:
        logger.debug("Delivering %d mutation record(s).", len(records))
        # Copy so that observers may disconnect while being notified.
        for callback in list(self._observers.values()):
            callback(records)
