from __future__ import annotations

from dataclasses import dataclass

from radarplot.model.colour import Colour, normalise_colour


@dataclass
class RenderStyle:
    """Visual settings for the matplotlib renderer.

    Attributes:
        stroke_colour: Colour of the frame, axes, guides, and labels.
        layer_colour: Default outline colour of item polygons.  Items
            with a colour override use that instead.
        layer_fill_alpha: Opacity of the item polygon fill.
        frame_alpha: Opacity of the background circle fill.
        inner_guide_alpha: Opacity of every guide except the outer one.
        line_width: Stroke width in points.
        show_labels: Whether to draw dimension labels.
        font_size: Label font size in points.
    """

    stroke_colour: Colour = "black"
    layer_colour: Colour = "blue"
    layer_fill_alpha: float = 0.25
    frame_alpha: float = 0.1
    inner_guide_alpha: float = 0.3
    line_width: float = 2.0
    show_labels: bool = True
    font_size: float = 8.0

    def __post_init__(self) -> None:
        for name in ("layer_fill_alpha", "frame_alpha", "inner_guide_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        if self.line_width < 0:
            raise ValueError(
                f"line_width must be non-negative, got {self.line_width}"
            )
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        normalise_colour(self.stroke_colour)
        normalise_colour(self.layer_colour)
