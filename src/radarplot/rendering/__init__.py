"""Rendering: matplotlib output of assembled chart geometry."""

from radarplot.rendering.static import render_mpl

__all__ = [
    "render_mpl",
]
