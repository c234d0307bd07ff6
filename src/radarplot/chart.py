"""The :class:`RadarChart` facade tying store, synchronizer, and renderer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from radarplot.assembler import ChartGeometry
from radarplot.construction.normaliser import item_descriptors
from radarplot.model import ChartConfig, Dimension, Item
from radarplot.parser import format_dimensions
from radarplot.source import ChildCollection, ItemDescriptor
from radarplot.store import ChartStore, StoreCallback
from radarplot.sync import OBSERVED_ATTRIBUTES, ChangeSynchronizer

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


class RadarChart:
    """A radar chart whose geometry follows its attributes and children.

    Configuration arrives as string attributes (``dimensions``,
    ``steps``, ``width``, ``height``, ``size``); items come from a
    :class:`ChildCollection` that the chart observes while connected.

    Example usage::

        items = ChildCollection([
            ItemDescriptor("A", {"x": 10, "y": 20}),
            ItemDescriptor("B", {"x": 30, "y": 40}),
        ])
        chart = RadarChart(dimensions="x:Speed,y:Power", steps="5")
        chart.connect(items)

        items[0].set_value("x", 80)     # geometry updates immediately
        chart.geometry.items[0].points

        chart.render_mpl("radar.png")
        chart.disconnect()

    Args:
        children: Optional item source to connect immediately.
        config: Defaults for step count and canvas size.  Removing a
            size attribute falls back to these values.
        **attributes: Initial attribute values.
    """

    def __init__(
        self,
        children: ChildCollection | Iterable[ItemDescriptor] | None = None,
        *,
        config: ChartConfig | None = None,
        **attributes: object,
    ) -> None:
        config = config if config is not None else ChartConfig()
        self.store = ChartStore(config)
        self.sync = ChangeSynchronizer(self.store, defaults=config)
        self._attributes: dict[str, str] = {}
        for name, value in attributes.items():
            self.set_attribute(name, value)
        if children is not None:
            self.connect(children)

    # -- Attributes --------------------------------------------------------

    @property
    def attributes(self) -> dict[str, str]:
        """A copy of the current attribute values."""
        return dict(self._attributes)

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: object) -> None:
        """Set attribute *name*, forwarding observed ones to the synchronizer.

        Setting ``None`` removes the attribute.
        """
        if value is None:
            self.remove_attribute(name)
            return
        old = self._attributes.get(name)
        new = str(value)
        self._attributes[name] = new
        if name in OBSERVED_ATTRIBUTES:
            self.sync.attribute_changed(name, old, new)

    def remove_attribute(self, name: str) -> None:
        old = self._attributes.pop(name, None)
        if old is not None and name in OBSERVED_ATTRIBUTES:
            self.sync.attribute_changed(name, old, None)

    # -- Item source -------------------------------------------------------

    def connect(
        self,
        children: ChildCollection | Iterable[ItemDescriptor],
    ) -> ChildCollection:
        """Read items from *children* and keep following its changes.

        A plain iterable of descriptors is wrapped in a new
        :class:`ChildCollection`, which is returned so that callers can
        mutate it.
        """
        if not isinstance(children, ChildCollection):
            children = ChildCollection(children)
        self.sync.attach(children)
        return children

    def disconnect(self) -> None:
        """Stop following the item source.  Current items are kept."""
        self.sync.detach()

    @property
    def connected(self) -> bool:
        return self.sync.attached

    @property
    def children(self) -> ChildCollection | None:
        return self.sync.source

    # -- State -------------------------------------------------------------

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return self.store.dimensions

    @property
    def items(self) -> tuple[Item, ...]:
        return self.store.items

    @property
    def config(self) -> ChartConfig:
        return self.store.config

    @property
    def geometry(self) -> ChartGeometry:
        """Up-to-date geometry for the current dimensions, items, and config."""
        return self.store.geometry

    def subscribe(self, callback: StoreCallback) -> int:
        """Call *callback* with fresh geometry whenever the chart changes."""
        return self.store.subscribe(callback)

    def unsubscribe(self, handle: int) -> None:
        self.store.unsubscribe(handle)

    # -- Rendering ---------------------------------------------------------

    def render_mpl(
        self,
        output: str | Path | None = None,
        *,
        ax: Axes | None = None,
        **kwargs: Any,
    ) -> Figure:
        """Render the chart with matplotlib.

        Convenience wrapper around
        :func:`radarplot.rendering.static.render_mpl`.
        """
        from radarplot.rendering.static import render_mpl

        return render_mpl(self.geometry, output, ax=ax, **kwargs)

    # -- Serialisation -----------------------------------------------------

    def to_dict(self) -> dict:
        """Serialise dimensions, configuration, and current children."""
        d: dict = {"dimensions": format_dimensions(self.dimensions)}
        config = self.config.to_dict()
        if config:
            d["config"] = config
        source = self.children
        if source is not None:
            d["items"] = [
                child.to_dict() if isinstance(child, ItemDescriptor)
                else ItemDescriptor.from_dict(child).to_dict()
                for child in item_descriptors(source)
            ]
        return d

    @classmethod
    def from_dict(cls, d: dict) -> RadarChart:
        """Build a connected chart from a :meth:`to_dict` dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        unknown = set(d) - {"dimensions", "config", "items"}
        if unknown:
            raise ValueError(f"unknown chart keys: {sorted(unknown)}")
        config = ChartConfig.from_dict(d.get("config", {}))
        chart = cls(config=config)
        if d.get("dimensions"):
            chart.set_attribute("dimensions", d["dimensions"])
        chart.connect(ItemDescriptor.from_dict(item) for item in d.get("items", []))
        return chart
