"""Reactive state store for a single chart.

The store holds five independently settable cells (``dimensions``,
``items``, ``steps``, ``width``, ``height``).  Writing any cell marks
the assembled geometry stale and notifies subscribers straight away,
so :attr:`ChartStore.geometry` never returns geometry older than the
last write.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Callable, Iterable

from radarplot.assembler import ChartGeometry, ChartSnapshot, assemble
from radarplot.model import ChartConfig, Dimension, Item

logger = logging.getLogger(__name__)

#: Called with the freshly assembled geometry and the names of the
#: cells written since the previous notification.
StoreCallback = Callable[[ChartGeometry, frozenset[str]], None]

_CELLS = ("dimensions", "items", "steps", "width", "height")


def _check_steps(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"steps must be a number, got {value!r}")
    if not math.isfinite(value) or value != int(value) or value < 1:
        raise ValueError(f"steps must be a positive integer, got {value}")
    return int(value)


def _check_size(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return float(value)


class ChartStore:
    """Holds the current state of one chart and its derived geometry.

    List cells are stored as tuples and replaced as a whole, so a reader
    sees either the old list or the new one, never a mixture.  Direct
    writes are validated and raise :class:`ValueError` on bad values;
    lenient parsing of external input is the synchronizer's job.

    Args:
        config: Initial step count and canvas size.
        dimensions: Initial dimensions.
        items: Initial items.
    """

    def __init__(
        self,
        config: ChartConfig | None = None,
        *,
        dimensions: Iterable[Dimension] = (),
        items: Iterable[Item] = (),
    ) -> None:
        config = config if config is not None else ChartConfig()
        self._dimensions: tuple[Dimension, ...] = tuple(dimensions)
        self._items: tuple[Item, ...] = tuple(items)
        self._steps = config.steps
        self._width = config.width
        self._height = config.height
        self._geometry: ChartGeometry | None = None
        self._subscribers: dict[int, StoreCallback] = {}
        self._next_handle = 0

    # -- Cells -------------------------------------------------------------

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return self._dimensions

    @dimensions.setter
    def dimensions(self, value: Iterable[Dimension]) -> None:
        self.update(dimensions=value)

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @items.setter
    def items(self, value: Iterable[Item]) -> None:
        self.update(items=value)

    @property
    def steps(self) -> int:
        return self._steps

    @steps.setter
    def steps(self, value: int) -> None:
        self.update(steps=value)

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self.update(width=value)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self.update(height=value)

    @property
    def config(self) -> ChartConfig:
        """The scalar cells as a :class:`ChartConfig`."""
        return ChartConfig(steps=self._steps, width=self._width, height=self._height)

    def update(self, **cells: object) -> None:
        """Write one or more cells, then notify subscribers once.

        All values are validated before any cell changes, so a failing
        call leaves the store untouched.

        Raises:
            TypeError: If a keyword does not name a cell.
            ValueError: If a scalar value is invalid.
        """
        unknown = cells.keys() - set(_CELLS)
        if unknown:
            raise TypeError(f"Unknown store cell(s): {', '.join(sorted(unknown))}")
        if not cells:
            return

        staged: dict[str, object] = {}
        for name, value in cells.items():
            if name in ("dimensions", "items"):
                staged[name] = tuple(value)  # type: ignore[arg-type]
            elif name == "steps":
                staged[name] = _check_steps(value)
            else:
                staged[name] = _check_size(name, value)

        for name, value in staged.items():
            setattr(self, f"_{name}", value)
        self._invalidate(frozenset(staged))

    # -- Derived state -----------------------------------------------------

    def snapshot(self) -> ChartSnapshot:
        """Return the current cell values as an immutable snapshot."""
        return ChartSnapshot(
            dimensions=self._dimensions,
            items=self._items,
            steps=self._steps,
            width=self._width,
            height=self._height,
        )

    @property
    def geometry(self) -> ChartGeometry:
        """Geometry for the current state, rebuilt if any cell changed."""
        if self._geometry is None:
            self._geometry = assemble(self.snapshot())
        return self._geometry

    @property
    def stale(self) -> bool:
        """Whether the next :attr:`geometry` read will rebuild."""
        return self._geometry is None

    def _invalidate(self, changed: frozenset[str]) -> None:
        self._geometry = None
        logger.debug("Store cells changed: %s", ", ".join(sorted(changed)))
        if not self._subscribers:
            return
        geometry = self.geometry
        for callback in list(self._subscribers.values()):
            callback(geometry, changed)

    # -- Subscription ------------------------------------------------------

    def subscribe(self, callback: StoreCallback) -> int:
        """Call *callback* with fresh geometry after every write.

        Returns:
            A handle to pass to :meth:`unsubscribe`.
        """
        handle = self._next_handle
        self._next_handle += 1
        self._subscribers[handle] = callback
        return handle

    def unsubscribe(self, handle: int) -> None:
        """Remove the subscriber registered under *handle*."""
        self._subscribers.pop(handle, None)
