"""Chart description save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from radarplot.chart import RadarChart


def save_chart(path: str | Path, chart: RadarChart) -> None:
    """Save a chart's dimensions, configuration, and items to a JSON file.

    Configuration fields at their default values are omitted.  The file
    is human-readable with two-space indentation.

    Args:
        path: Destination file path.
        chart: The chart to describe.
    """
    Path(path).write_text(json.dumps(chart.to_dict(), indent=2) + "\n")


def load_chart(path: str | Path) -> RadarChart:
    """Load a chart from a JSON file written by :func:`save_chart`.

    All sections are optional.  The returned chart is connected to a new
    :class:`~radarplot.source.ChildCollection` holding the file's items.

    Raises:
        ValueError: If the file contains unknown keys.
    """
    from radarplot.chart import RadarChart

    return RadarChart.from_dict(json.loads(Path(path).read_text()))
