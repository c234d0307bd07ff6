"""Draw assembled chart geometry into a matplotlib Axes.

Layers are painted bottom to top: frame circle, axis lines, step
guides, item polygons (in item order), then labels.  Geometry is in
chart units with y growing downwards, so the y axis is inverted.
"""

from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PolyCollection
from matplotlib.patches import Circle

from radarplot._constants import VIEWPORT_HALF_EXTENT
from radarplot.assembler import ChartGeometry
from radarplot.geometry import LabelSide
from radarplot.model import RenderStyle, item_colour, normalise_colour

# Labels sit just outside the outer ring.
_LABEL_OFFSET = 1.08
# Extra viewport room for labels, as a multiple of the half-extent.
_LABEL_MARGIN = 1.3

_HORIZONTAL_ALIGNMENT: dict[LabelSide, str] = {
    "left": "right",
    "right": "left",
    "center": "center",
}


def _draw_chart(ax: Axes, geometry: ChartGeometry, style: RenderStyle) -> None:
    """Paint *geometry* onto *ax*.

    Clears any collections, patches, and texts left by a previous call.
    Does **not** create or show the figure.
    """
    while ax.collections:
        ax.collections[0].remove()
    for artist in ax.patches[:] + ax.texts[:]:
        artist.remove()

    stroke = normalise_colour(style.stroke_colour)
    lw = style.line_width

    ax.add_patch(Circle(
        (0.0, 0.0), geometry.frame_radius,
        facecolor=(*stroke, style.frame_alpha), edgecolor="none",
    ))

    if geometry.axes:
        ax.add_collection(LineCollection(
            [axis.points for axis in geometry.axes],
            colors=[(*stroke, 1.0)], linewidths=lw,
        ))

    guides = [g for g in geometry.guides if len(g.points)]
    if guides:
        ax.add_collection(PolyCollection(
            [g.points for g in guides],
            closed=True,
            facecolors="none",
            edgecolors=[
                (*stroke, 1.0 if g.outer else style.inner_guide_alpha)
                for g in guides
            ],
            linewidths=lw,
        ))

    visible = [p for p in geometry.items if not p.disabled and len(p.points)]
    if visible:
        colours = [item_colour(p.color, style.layer_colour) for p in visible]
        ax.add_collection(PolyCollection(
            [p.points for p in visible],
            closed=True,
            facecolors=[(*c, style.layer_fill_alpha) for c in colours],
            edgecolors=[(*c, 1.0) for c in colours],
            linewidths=lw,
        ))

    if style.show_labels:
        for anchor in geometry.labels:
            x, y = anchor.position
            ax.text(
                x * _LABEL_OFFSET, y * _LABEL_OFFSET, anchor.label,
                ha=_HORIZONTAL_ALIGNMENT[anchor.side], va="center",
                color=stroke, fontsize=style.font_size,
            )

    extent = VIEWPORT_HALF_EXTENT
    if style.show_labels and geometry.labels:
        extent *= _LABEL_MARGIN
    ax.set_aspect("equal")
    ax.set_xlim(-extent, extent)
    ax.set_ylim(extent, -extent)
    ax.axis("off")
