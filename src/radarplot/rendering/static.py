"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from radarplot.assembler import ChartGeometry
from radarplot.model import Colour, RenderStyle, normalise_colour
from radarplot.rendering.painter import _draw_chart

if TYPE_CHECKING:
    from radarplot.chart import RadarChart

_STYLE_FIELDS = frozenset(f.name for f in fields(RenderStyle))


def _resolve_style(
    style: RenderStyle | None,
    **kwargs: Any,
) -> RenderStyle:
    """Build a :class:`RenderStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderStyle`` field replaces that
    field's value; ``None`` means "not provided".

    Raises:
        TypeError: If a kwarg name does not match any ``RenderStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )
    s = style if style is not None else RenderStyle()
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def render_mpl(
    chart: RadarChart | ChartGeometry,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    style: RenderStyle | None = None,
    dpi: int = 100,
    background: Colour = "white",
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Render a radar chart as a static matplotlib figure.

    The figure is sized so that, at *dpi*, it matches the chart's
    canvas width and height in pixels.

    Example usage::

        chart = RadarChart(dimensions="x:Speed,y:Power,z:Range")
        chart.connect([ItemDescriptor("A", {"x": 40, "y": 70, "z": 90})])

        render_mpl(chart, "radar.png")
        render_mpl(chart, "radar.svg", layer_colour="darkred")

        # Into an existing axes:
        fig, (ax1, ax2) = plt.subplots(1, 2)
        render_mpl(chart, ax=ax2)

    Args:
        chart: A :class:`RadarChart`, or geometry already assembled.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is given.
        ax: Optional existing axes to draw into.  The caller keeps
            control of the parent figure.
        style: Base :class:`RenderStyle`.  Any of its field names may
            also be passed as a keyword argument to override it.
        dpi: Resolution used to convert the canvas size to inches.
        background: Figure background colour.
        show: Whether to call ``plt.show()``.  Defaults to ``True`` when
            *output* is ``None``.
        **style_kwargs: :class:`RenderStyle` field overrides.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure`.
    """
    resolved = _resolve_style(style, **style_kwargs)
    geometry = chart if isinstance(chart, ChartGeometry) else chart.geometry

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_chart(ax, geometry, resolved)
        return fig

    bg_rgb = normalise_colour(background)
    figsize = (geometry.width / dpi, geometry.height / dpi)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)

    _draw_chart(ax, geometry, resolved)

    if output is not None:
        fig.savefig(str(output), dpi=dpi)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
