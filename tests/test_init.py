"""Tests for radarplot public API."""

import radarplot


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in radarplot.__all__:
            assert hasattr(radarplot, name), f"{name} not importable from radarplot"

    def test_end_to_end(self, tmp_path):
        items = radarplot.ChildCollection([
            radarplot.ItemDescriptor("A", {"x": 10, "y": 20}),
        ])
        chart = radarplot.RadarChart(items, dimensions="x:Speed,y:Power,z:Range")
        items.append(radarplot.ItemDescriptor("B", {"z": "90"}))
        assert len(chart.geometry.items) == 2

        out = tmp_path / "radar.png"
        chart.render_mpl(out)
        assert out.exists()
        assert out.stat().st_size > 0
