# packages/geobounds-core/src/geobounds_core/geo/serialization.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geobounds_core.geo.crs import Bounds


def format_number(value: float) -> str:
    """
    Shortest round-trip rendering of a double: 45.0, 38.29805555555556, -0.0.
    """
    return repr(float(value))


def envelope(bounds: Bounds) -> str:
    # WKT/CQL axis order: minX, maxX, maxY, minY
    parts = (bounds.min_x, bounds.max_x, bounds.max_y, bounds.min_y)
    return f"ENVELOPE({', '.join(format_number(p) for p in parts)})"


def bbox(bounds: Bounds) -> str:
    return " ".join(format_number(p) for p in bounds.as_tuple())
