from __future__ import annotations

import logging

from matplotlib.colors import to_rgb

logger = logging.getLogger(__name__)

#: A colour as written in chart attributes and style files: a CSS
#: colour name or hex string (e.g. ``"blue"``, ``"#0000ff"``).
Colour = str


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour string to an (r, g, b) tuple in [0, 1].

    Raises:
        ValueError: If *colour* is not a string matplotlib recognises.
    """
    if not isinstance(colour, str):
        raise ValueError(f"Colour must be a string, got {colour!r}")
    try:
        return tuple(float(c) for c in to_rgb(colour))  # type: ignore[return-value]
    except ValueError:
        raise ValueError(f"Unrecognised colour: {colour!r}") from None


def item_colour(
    override: str | None,
    default: Colour,
) -> tuple[float, float, float]:
    """Resolve an item's colour override, falling back to *default*.

    Item colours come from external descriptors, so an unrecognised
    override is logged and replaced rather than raised.
    """
    if override:
        try:
            return normalise_colour(override)
        except ValueError:
            logger.warning(
                "Unrecognised item colour %r; using the default.", override,
            )
    return normalise_colour(default)
