"""Shared test fixtures for radarplot."""

import pytest

from radarplot.model import Dimension
from radarplot.source import ChildCollection, ItemDescriptor


@pytest.fixture
def xy_dimensions():
    """Return two dimensions with ids ``x`` and ``y``."""
    return [Dimension("x", "X axis"), Dimension("y", "Y axis")]


@pytest.fixture
def two_items():
    """Return a collection holding items A and B over ``x`` and ``y``."""
    return ChildCollection([
        ItemDescriptor("A", {"x": 10, "y": 20}),
        ItemDescriptor("B", {"x": 30, "y": 40}),
    ])


@pytest.fixture
def chart_json(tmp_path):
    """Return the path of a small chart description file."""
    path = tmp_path / "chart.json"
    path.write_text(
        '{\n'
        '  "dimensions": "x:Speed,y:Power,z:Range",\n'
        '  "config": {"steps": 5},\n'
        '  "items": [\n'
        '    {"label": "A", "values": {"x": 40, "y": "70"}},\n'
        '    {"values": {"z": 90}, "disabled": true, "color": "red"}\n'
        '  ]\n'
        '}\n'
    )
    return path
