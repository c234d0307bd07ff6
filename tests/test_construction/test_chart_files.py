"""Tests for chart description save/load."""

import json

import pytest

from radarplot.chart import RadarChart
from radarplot.construction.chart_files import load_chart, save_chart
from radarplot.source import ItemDescriptor


class TestLoadChart:
    def test_load(self, chart_json):
        chart = load_chart(chart_json)
        assert [d.label for d in chart.dimensions] == ["Speed", "Power", "Range"]
        assert chart.config.steps == 5
        assert [i.label for i in chart.items] == ["A", "Untitled"]
        assert chart.items[0].data == {"x": 40, "y": "70", "z": 0}
        assert chart.items[1].disabled is True
        assert chart.items[1].color == "red"

    def test_loaded_chart_is_live(self, chart_json):
        chart = load_chart(chart_json)
        chart.children.append(ItemDescriptor("C"))
        assert len(chart.geometry.items) == 3

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}")
        chart = load_chart(path)
        assert chart.dimensions == ()
        assert chart.items == ()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"theme": "dark"}')
        with pytest.raises(ValueError, match="unknown"):
            load_chart(path)


class TestSaveChart:
    def test_round_trip(self, chart_json, tmp_path):
        chart = load_chart(chart_json)
        out = tmp_path / "saved.json"
        save_chart(out, chart)
        restored = load_chart(out)
        assert restored.dimensions == chart.dimensions
        assert restored.items == chart.items
        assert restored.config == chart.config

    def test_human_readable(self, tmp_path):
        chart = RadarChart(dimensions="a:A")
        out = tmp_path / "chart.json"
        save_chart(out, chart)
        text = out.read_text()
        assert text.endswith("\n")
        assert json.loads(text) == {"dimensions": "a:A"}
