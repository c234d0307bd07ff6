"""Parser for compact ``id:label,id:label`` dimension strings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from radarplot.model import Dimension

logger = logging.getLogger(__name__)


def parse_dimensions(spec: str | None) -> list[Dimension]:
    """Parse a dimension string into an ordered list of dimensions.

    The string is split on ``,`` and each part on its first ``:``.
    Parts without a ``:`` are skipped with a warning rather than
    failing the whole string.  Ids and labels are kept verbatim, so
    ``"a: Alpha"`` yields the label ``" Alpha"``.  Duplicate ids are
    kept; each renders as its own axis.

    Args:
        spec: The dimension string, e.g. ``"str:Strength,dex:Dexterity"``.
            ``None`` or an empty string yields an empty list.

    Returns:
        Dimensions in input order.
    """
    if not spec:
        return []

    dimensions: list[Dimension] = []
    for part in spec.split(","):
        fields = part.split(":", 1)
        if len(fields) != 2:
            logger.warning("Skipped invalid dimension %r.", part)
            continue
        dimensions.append(Dimension(id=fields[0], label=fields[1]))
    return dimensions


def apply_dimensions(
    current: Sequence[Dimension],
    spec: str | None,
) -> list[Dimension]:
    """Return the dimensions that should be in effect after *spec* is applied.

    A string with at least one valid part replaces *current* outright.
    An empty or wholly malformed string leaves *current* in place.
    """
    parsed = parse_dimensions(spec)
    if parsed:
        return parsed
    if spec:
        logger.warning(
            "No valid dimensions in %r; keeping the previous %d.",
            spec, len(current),
        )
    return list(current)


def format_dimensions(dimensions: Sequence[Dimension]) -> str:
    """Inverse of :func:`parse_dimensions` for well-formed dimensions."""
    return ",".join(dim.to_spec() for dim in dimensions)
