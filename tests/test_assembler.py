"""Tests for radarplot.assembler: axes, guides, item paths, labels."""

import numpy as np
import pytest

from radarplot.assembler import (
    ChartGeometry,
    ChartSnapshot,
    assemble,
    item_path_points,
    step_guides,
)
from radarplot.geometry import coords
from radarplot.model import Dimension, Item


@pytest.fixture
def snapshot(xy_dimensions):
    return ChartSnapshot(
        dimensions=tuple(xy_dimensions),
        items=(
            Item("A", {"x": 10, "y": 20}),
            Item("B", {"x": 30, "y": 40}),
        ),
    )


class TestItemPaths:
    def test_two_items_in_order(self, snapshot):
        geometry = assemble(snapshot)
        assert [p.label for p in geometry.items] == ["A", "B"]
        assert [p.index for p in geometry.items] == [0, 1]

    def test_points_from_coords(self, snapshot):
        geometry = assemble(snapshot)
        for path, (vx, vy) in zip(geometry.items, [(10, 20), (30, 40)]):
            expected = [coords(vx, 0, 2), coords(vy, 1, 2)]
            np.testing.assert_allclose(path.points, expected, atol=1e-12)

    def test_disabled_and_colour_carried(self, xy_dimensions):
        snap = ChartSnapshot(
            dimensions=tuple(xy_dimensions),
            items=(Item("A", {"x": 50}, disabled=True, color="red"),),
        )
        (path,) = assemble(snap).items
        assert path.disabled is True
        assert path.color == "red"
        assert path.points.shape == (2, 2)

    def test_string_and_bad_values(self, xy_dimensions):
        points = item_path_points({"x": "50", "y": "junk"}, xy_dimensions)
        np.testing.assert_allclose(points[0], coords(50, 0, 2), atol=1e-12)
        np.testing.assert_allclose(points[1], (0.0, 0.0), atol=1e-12)

    def test_duplicate_ids_render_separately(self):
        dims = [Dimension("a", "One"), Dimension("a", "Two"), Dimension("b", "Three")]
        points = item_path_points({"a": 60, "b": 30}, dims)
        assert points.shape == (3, 2)
        np.testing.assert_allclose(points[1], coords(60, 1, 3), atol=1e-12)


class TestStepGuides:
    def test_values_and_outer_flag(self, xy_dimensions):
        guides = step_guides(xy_dimensions, 4)
        assert [g.value for g in guides] == [25.0, 50.0, 75.0, 100.0]
        assert [g.outer for g in guides] == [False, False, False, True]

    def test_every_vertex_at_step_value(self):
        dims = [Dimension(str(i), str(i)) for i in range(5)]
        for guide in step_guides(dims, 3):
            radii = np.hypot(guide.points[:, 0], guide.points[:, 1])
            np.testing.assert_allclose(radii, guide.value)

    def test_single_step_is_outer(self, xy_dimensions):
        (guide,) = step_guides(xy_dimensions, 1)
        assert guide.outer
        assert guide.value == 100.0


class TestAxesAndLabels:
    def test_axis_lines(self):
        dims = [Dimension(c, c.upper()) for c in "abcd"]
        geometry = assemble(ChartSnapshot(dimensions=tuple(dims)))
        assert [a.label for a in geometry.axes] == ["A", "B", "C", "D"]
        for i, axis in enumerate(geometry.axes):
            np.testing.assert_allclose(axis.points[0], (0.0, 0.0), atol=1e-12)
            np.testing.assert_allclose(axis.points[1], coords(100, i, 4), atol=1e-9)

    def test_axes_align_with_outer_guide(self):
        dims = [Dimension(c, c) for c in "abcde"]
        geometry = assemble(ChartSnapshot(dimensions=tuple(dims)))
        outer = geometry.guides[-1].points
        ends = np.array([a.points[1] for a in geometry.axes])
        np.testing.assert_allclose(ends, outer, atol=1e-9)

    def test_labels(self):
        dims = [Dimension(c, c.upper()) for c in "abcd"]
        geometry = assemble(ChartSnapshot(dimensions=tuple(dims)))
        assert [l.side for l in geometry.labels] == ["center", "left", "center", "right"]
        assert geometry.labels[1].label == "B"


class TestEmptyChart:
    def test_no_dimensions(self):
        geometry = assemble(ChartSnapshot(items=(Item("A"),)))
        assert geometry.axes == []
        assert geometry.labels == []
        assert len(geometry.guides) == 4
        assert all(g.points.shape == (0, 2) for g in geometry.guides)
        assert geometry.items[0].points.shape == (0, 2)


class TestCanvas:
    def test_centre_maps_to_canvas_centre(self):
        geometry = ChartGeometry(width=300, height=200)
        np.testing.assert_allclose(geometry.to_canvas([[0, 0]]), [[150, 100]])

    def test_uniform_scale_fits_smaller_side(self):
        geometry = ChartGeometry(width=300, height=200)
        assert geometry.scale == 1.0
        np.testing.assert_allclose(
            geometry.to_canvas([[100, -100]]), [[250, 0]],
        )

    def test_default_canvas(self):
        geometry = ChartGeometry()
        assert geometry.scale == pytest.approx(1.25)
        assert geometry.frame_radius == 99.0
