# packages/geobounds-core/src/geobounds_core/geo/bounds.py
from __future__ import annotations

import re
from typing import Any, Tuple

from geobounds_core.geo.coordinate import clean, convert_token, logger
from geobounds_core.geo.crs import Rectangle

# "<E|W ...>-<E|W ...>/<N|S ...>-<N|S ...>", any dash run between the two ends, optional final newline
RANGES_RE = re.compile(r"(?P<x>[EW].+-+.+)\s*/\s*(?P<y>[NS].+-+.+)\n?")
DASH_RUN_RE = re.compile(r"-+")


def split_range(half: str) -> Tuple[float, float]:
    """
    Split one axis range on dash runs and return (min, max) of the converted ends.
    """
    values = [convert_token(part) for part in DASH_RUN_RE.split(half) if part]
    return min(values), max(values)


def split_bounds(raw: Any) -> Rectangle:
    """
    Extract lon/lat extents from a catalog coordinate string such as
    "(W 123°23ʹ16ʺ--W 122°31ʹ22ʺ/N 39°23ʹ57ʺ--N 38°17ʹ53ʺ)".

    Ends given in either order are sorted. The result may be out of range.
    """
    if not isinstance(raw, str):
        logger.debug(f"Not a string: {type(raw).__name__}")
        return Rectangle.empty()

    m = RANGES_RE.fullmatch(clean(raw))
    if not m:
        logger.debug(f"Not a coordinate range string: {raw!r}")
        return Rectangle.empty()

    min_x, max_x = split_range(m.group("x"))
    min_y, max_y = split_range(m.group("y"))
    return Rectangle.from_bounds(min_x, min_y, max_x, max_y)


def parse(text: Any) -> Rectangle:
    """
    Top-level entry: clean, split, convert, build. Never raises.

    Check `is_valid()` (or a None from as_envelope/as_bbox) on the result.
    """
    rect = split_bounds(text)
    if not rect.is_empty and not rect.is_valid():
        logger.debug(f"Coordinates out of range: {text!r} -> {rect.as_tuple()}")
    return rect
