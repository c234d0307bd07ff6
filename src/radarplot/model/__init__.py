"""Core data model for radarplot: dimensions, items, configuration, and style."""

from radarplot.model.chart_config import ChartConfig
from radarplot.model.colour import Colour, item_colour, normalise_colour
from radarplot.model.dimension import Dimension
from radarplot.model.item import Item, RawValue
from radarplot.model.render_style import RenderStyle

__all__ = [
    "ChartConfig",
    "Colour",
    "Dimension",
    "Item",
    "RawValue",
    "RenderStyle",
    "item_colour",
    "normalise_colour",
]
