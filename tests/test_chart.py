"""Tests for radarplot.chart: the RadarChart facade."""

import logging

import pytest

from radarplot.chart import RadarChart
from radarplot.model import ChartConfig
from radarplot.source import ChildCollection, ItemDescriptor


@pytest.fixture
def chart(two_items):
    return RadarChart(two_items, dimensions="x:X,y:Y")


class TestAttributes:
    def test_initial_attributes(self):
        chart = RadarChart(dimensions="a:A,b:B", steps=5, width="300")
        assert [d.id for d in chart.dimensions] == ["a", "b"]
        assert chart.config == ChartConfig(steps=5, width=300)
        assert chart.attributes == {"dimensions": "a:A,b:B", "steps": "5", "width": "300"}

    def test_set_attribute(self, chart):
        chart.set_attribute("steps", "2")
        assert len(chart.geometry.guides) == 2
        assert chart.get_attribute("steps") == "2"

    def test_bad_steps_kept_as_attribute_only(self, chart):
        chart.set_attribute("steps", "abc")
        assert chart.get_attribute("steps") == "abc"
        assert chart.config.steps == 4

    def test_remove_size_attribute(self):
        chart = RadarChart(config=ChartConfig.legacy(), height="400")
        assert chart.config.height == 400.0
        chart.remove_attribute("height")
        assert chart.config.height == 200.0
        assert chart.get_attribute("height") is None

    def test_remove_dimensions_keeps_them(self, chart):
        chart.remove_attribute("dimensions")
        assert [d.id for d in chart.dimensions] == ["x", "y"]

    def test_set_none_removes_attribute(self, chart, caplog):
        with caplog.at_level(logging.WARNING, logger="radarplot"):
            chart.set_attribute("dimensions", None)
        assert chart.get_attribute("dimensions") is None
        assert [d.id for d in chart.dimensions] == ["x", "y"]
        assert caplog.records == []

    def test_set_none_resets_size(self):
        chart = RadarChart(width="400")
        chart.set_attribute("width", None)
        assert chart.config.width == 250.0
        assert "width" not in chart.attributes

    def test_unobserved_attribute_stored(self, chart):
        chart.set_attribute("title", "Stats")
        assert chart.get_attribute("title") == "Stats"


class TestItems:
    def test_connected_on_construction(self, chart):
        assert chart.connected
        assert [i.label for i in chart.items] == ["A", "B"]

    def test_connect_plain_list(self):
        chart = RadarChart(dimensions="x:X")
        source = chart.connect([ItemDescriptor("A", {"x": 5})])
        assert isinstance(source, ChildCollection)
        source.append(ItemDescriptor("B"))
        assert [i.label for i in chart.items] == ["A", "B"]

    def test_geometry_follows_edits(self, chart, two_items):
        before = chart.geometry.items[0].points.copy()
        two_items[0].set_value("x", 90)
        after = chart.geometry.items[0].points
        assert not (before == after).all()

    def test_disconnect(self, chart, two_items):
        chart.disconnect()
        two_items.clear()
        assert not chart.connected
        assert chart.children is None
        assert len(chart.items) == 2

    def test_subscribe(self, chart, two_items):
        seen = []
        chart.subscribe(lambda geometry, changed: seen.append(len(geometry.items)))
        two_items.append(ItemDescriptor("C"))
        assert seen == [3]


class TestSerialisation:
    def test_to_dict(self, chart):
        chart.set_attribute("steps", "6")
        d = chart.to_dict()
        assert d["dimensions"] == "x:X,y:Y"
        assert d["config"] == {"steps": 6}
        assert d["items"][0] == {"label": "A", "values": {"x": 10, "y": 20}}

    def test_default_config_omitted(self):
        assert "config" not in RadarChart().to_dict()

    def test_round_trip(self, chart):
        restored = RadarChart.from_dict(chart.to_dict())
        assert restored.dimensions == chart.dimensions
        assert restored.items == chart.items
        assert restored.config == chart.config
        assert restored.connected

    def test_round_trip_mapping_child(self):
        children = ChildCollection([
            ItemDescriptor("A", {"x": 1}),
            {"label": "M", "values": {"x": 5}},
        ])
        chart = RadarChart(children, dimensions="x:X,y:Y")
        assert [i.label for i in chart.items] == ["A", "M"]
        d = chart.to_dict()
        assert d["items"][1] == {"label": "M", "values": {"x": 5}}
        restored = RadarChart.from_dict(d)
        assert [i.label for i in restored.items] == ["A", "M"]
        assert restored.items == chart.items

    def test_to_dict_skips_foreign_children(self):
        chart = RadarChart(ChildCollection(["text", ItemDescriptor("A")]))
        assert chart.to_dict()["items"] == [{"label": "A"}]

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="unknown"):
            RadarChart.from_dict({"dimensions": "a:A", "legend": True})
