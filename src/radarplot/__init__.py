"""radarplot: radar (spider) charts that follow a live item source.

A chart is configured by compact string attributes and fed items by an
observable collection of descriptors.  Every change to either is folded
into a small reactive store, which reassembles the chart geometry
(axes, step guides, item polygons, label anchors) before it is next
read.  Geometry can be drawn with matplotlib.

Example usage::

    from radarplot import ChildCollection, ItemDescriptor, RadarChart

    items = ChildCollection([ItemDescriptor("A", {"x": 10, "y": 20})])
    chart = RadarChart(items, dimensions="x:Speed,y:Power,z:Range")
    items.append(ItemDescriptor("B", {"x": 30, "z": 90}))
    chart.render_mpl("radar.png")
"""

import logging

from radarplot.assembler import (
    AxisLine,
    ChartGeometry,
    ChartSnapshot,
    ItemPath,
    LabelAnchor,
    StepGuide,
    assemble,
)
from radarplot.chart import RadarChart
from radarplot.construction import (
    load_chart,
    normalise_item,
    normalise_items,
    save_chart,
)
from radarplot.geometry import coords, label_side, polygon_points, to_number
from radarplot.model import (
    ChartConfig,
    Colour,
    Dimension,
    Item,
    RenderStyle,
    normalise_colour,
)
from radarplot.parser import apply_dimensions, format_dimensions, parse_dimensions
from radarplot.rendering import render_mpl
from radarplot.source import ChildCollection, ItemDescriptor, MutationRecord
from radarplot.store import ChartStore
from radarplot.sync import ChangeSynchronizer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AxisLine",
    "ChangeSynchronizer",
    "ChartConfig",
    "ChartGeometry",
    "ChartSnapshot",
    "ChartStore",
    "ChildCollection",
    "Colour",
    "Dimension",
    "Item",
    "ItemDescriptor",
    "ItemPath",
    "LabelAnchor",
    "MutationRecord",
    "RadarChart",
    "RenderStyle",
    "StepGuide",
    "apply_dimensions",
    "assemble",
    "coords",
    "format_dimensions",
    "label_side",
    "load_chart",
    "normalise_colour",
    "normalise_item",
    "normalise_items",
    "parse_dimensions",
    "polygon_points",
    "render_mpl",
    "save_chart",
    "to_number",
]
