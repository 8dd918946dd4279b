# packages/geobounds-core/src/geobounds_core/geo/crs.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from geobounds_core.geo import serialization

# EPSG:4326 axis ranges, closed intervals.
LON_RANGE: Tuple[float, float] = (-180.0, 180.0)
LAT_RANGE: Tuple[float, float] = (-90.0, 90.0)


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


def _in_range(value: float, bounds: Tuple[float, float]) -> bool:
    lo, hi = bounds
    return lo <= value <= hi


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned lon/lat rectangle, or the empty rectangle when `bounds` is None.

    Either all four extents are present or none are. A populated rectangle
    may still be out of range; check `is_valid()` before using it.
    """

    bounds: Optional[Bounds] = None

    @classmethod
    def empty(cls) -> Rectangle:
        return cls(bounds=None)

    @classmethod
    def from_bounds(cls, min_x: Any, min_y: Any, max_x: Any, max_y: Any) -> Rectangle:
        """
        Build from four values coercible with float().

        Any value that does not coerce gives the empty rectangle. Ordering and
        ranges are taken as given.
        """
        try:
            bounds = Bounds(
                min_x=float(min_x),
                min_y=float(min_y),
                max_x=float(max_x),
                max_y=float(max_y),
            )
        except (TypeError, ValueError, OverflowError):
            return cls.empty()
        return cls(bounds=bounds)

    @property
    def is_empty(self) -> bool:
        return self.bounds is None

    def is_valid(self) -> bool:
        # min <= max is not checked, only per-field range membership.
        if self.bounds is None:
            return False
        b = self.bounds
        return (
            _in_range(b.min_x, LON_RANGE)
            and _in_range(b.max_x, LON_RANGE)
            and _in_range(b.min_y, LAT_RANGE)
            and _in_range(b.max_y, LAT_RANGE)
        )

    def as_tuple(self) -> Optional[Tuple[float, float, float, float]]:
        return self.bounds.as_tuple() if self.bounds is not None else None

    def as_envelope(self) -> Optional[str]:
        """WKT/CQL ENVELOPE(minX, maxX, maxY, minY), or None when not valid."""
        if not self.is_valid():
            return None
        return serialization.envelope(self.bounds)

    def as_bbox(self) -> Optional[str]:
        """Solr bbox "minX minY maxX maxY", or None when not valid."""
        if not self.is_valid():
            return None
        return serialization.bbox(self.bounds)


EMPTY = Rectangle.empty()
