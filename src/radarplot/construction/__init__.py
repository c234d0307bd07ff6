"""Chart construction: item normalisation and chart description files."""

from radarplot.construction.chart_files import load_chart, save_chart
from radarplot.construction.normaliser import (
    item_descriptors,
    normalise_item,
    normalise_items,
)

__all__ = [
    "item_descriptors",
    "load_chart",
    "normalise_item",
    "normalise_items",
    "save_chart",
]
