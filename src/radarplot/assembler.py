"""Assemble renderable geometry from a chart snapshot.

Everything is recomputed from scratch for each snapshot.  Charts have a
handful of dimensions and items, so a full rebuild is cheap and avoids
keeping incremental state in sync.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from radarplot._constants import (
    DEFAULT_SIZE,
    DEFAULT_STEPS,
    FRAME_RADIUS,
    MAX_VALUE,
    VIEWPORT_HALF_EXTENT,
)
from radarplot.geometry import LabelSide, coords, label_side, polygon_points, to_number
from radarplot.model import Dimension, Item


@dataclass(frozen=True)
class ChartSnapshot:
    """Immutable view of a chart's state at one instant."""

    dimensions: tuple[Dimension, ...] = ()
    items: tuple[Item, ...] = ()
    steps: int = DEFAULT_STEPS
    width: float = DEFAULT_SIZE
    height: float = DEFAULT_SIZE


@dataclass
class AxisLine:
    """Line from the centre to the outer ring for one dimension.

    Attributes:
        index: Dimension position, for styling.
        dimension_id: Id of the dimension.
        label: Dimension label, for annotation.
        points: ``(2, 2)`` array: the centre, then the outer end.
    """

    index: int
    dimension_id: str
    label: str
    points: np.ndarray


@dataclass
class StepGuide:
    """Concentric reference polygon at a uniform value.

    Attributes:
        index: Zero-based step number, innermost first.
        value: The value shared by every vertex.
        points: ``(n_dimensions, 2)`` vertex array.
        outer: ``True`` only for the last (outermost) step.
    """

    index: int
    value: float
    points: np.ndarray
    outer: bool = False


@dataclass
class ItemPath:
    """Data polygon of one item.

    Attributes:
        index: Position in the chart's item list.  Later items are drawn
            on top.
        label: Item label.
        points: ``(n_dimensions, 2)`` vertex array, in dimension order.
        disabled: Whether the renderer should hide this polygon.
        color: Optional colour override.
    """

    index: int
    label: str
    points: np.ndarray
    disabled: bool = False
    color: str | None = None


@dataclass
class LabelAnchor:
    """Position and anchoring of a dimension label."""

    index: int
    label: str
    position: tuple[float, float]
    side: LabelSide


@dataclass
class ChartGeometry:
    """Everything a renderer needs to paint one chart.

    Points are in chart units: the centre is ``(0, 0)``, the viewport
    spans ``[-100, 100]`` on both axes, and y grows downwards.  Use
    :meth:`to_canvas` to map them to pixels.

    Attributes:
        axes: One line per dimension.
        guides: One polygon per step, innermost first.
        items: One polygon per item, bottom-most first.
        labels: One anchor per dimension.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        frame_radius: Radius of the background circle in chart units.
    """

    axes: list[AxisLine] = field(default_factory=list)
    guides: list[StepGuide] = field(default_factory=list)
    items: list[ItemPath] = field(default_factory=list)
    labels: list[LabelAnchor] = field(default_factory=list)
    width: float = DEFAULT_SIZE
    height: float = DEFAULT_SIZE
    frame_radius: float = FRAME_RADIUS

    @property
    def scale(self) -> float:
        """Pixels per chart unit, fitting the viewport into the canvas."""
        return min(self.width, self.height) / (2 * VIEWPORT_HALF_EXTENT)

    def to_canvas(self, points: np.ndarray) -> np.ndarray:
        """Map chart-unit points to pixel coordinates on the canvas.

        The chart centre maps to the canvas centre and the viewport is
        scaled uniformly to fit the smaller canvas dimension.
        """
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        centre = np.array([self.width / 2, self.height / 2])
        return points * self.scale + centre


def item_path_points(
    data: dict[str, object],
    dimensions: Sequence[Dimension],
) -> np.ndarray:
    """Vertices of the polygon for *data* over *dimensions*.

    Missing or non-numeric values plot at the centre.
    """
    values = [to_number(data.get(dim.id, 0)) for dim in dimensions]
    return polygon_points(values)


def axis_lines(dimensions: Sequence[Dimension]) -> list[AxisLine]:
    n = len(dimensions)
    return [
        AxisLine(
            index=i,
            dimension_id=dim.id,
            label=dim.label,
            points=np.array([coords(0.0, i, n), coords(MAX_VALUE, i, n)]),
        )
        for i, dim in enumerate(dimensions)
    ]


def step_guides(dimensions: Sequence[Dimension], steps: int) -> list[StepGuide]:
    """Build the concentric guides, reusing the item polygon builder."""
    guides = []
    for i in range(steps):
        value = (MAX_VALUE / steps) * (i + 1)
        data = {dim.id: value for dim in dimensions}
        guides.append(StepGuide(
            index=i,
            value=value,
            points=item_path_points(data, dimensions),
            outer=(i + 1 == steps),
        ))
    return guides


def item_paths(
    items: Sequence[Item],
    dimensions: Sequence[Dimension],
) -> list[ItemPath]:
    return [
        ItemPath(
            index=i,
            label=item.label,
            points=item_path_points(item.data, dimensions),
            disabled=item.disabled,
            color=item.color,
        )
        for i, item in enumerate(items)
    ]


def label_anchors(dimensions: Sequence[Dimension]) -> list[LabelAnchor]:
    n = len(dimensions)
    return [
        LabelAnchor(
            index=i,
            label=dim.label,
            position=coords(MAX_VALUE, i, n),
            side=label_side(MAX_VALUE, i, n),
        )
        for i, dim in enumerate(dimensions)
    ]


def assemble(snapshot: ChartSnapshot) -> ChartGeometry:
    """Build the full :class:`ChartGeometry` for *snapshot*."""
    return ChartGeometry(
        axes=axis_lines(snapshot.dimensions),
        guides=step_guides(snapshot.dimensions, snapshot.steps),
        items=item_paths(snapshot.items, snapshot.dimensions),
        labels=label_anchors(snapshot.dimensions),
        width=snapshot.width,
        height=snapshot.height,
    )
