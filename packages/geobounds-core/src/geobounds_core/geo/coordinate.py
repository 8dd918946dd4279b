# packages/geobounds-core/src/geobounds_core/geo/coordinate.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

from geobounds_core.config.logging import configure_logging

logger = configure_logging(logger_name="geobounds.parse")

# Degree markers: degree sign, superscript zero, masculine ordinal indicator.
DEGREE_MARKS = "°⁰º"
# Minute markers: modifier letter prime, apostrophe.
MINUTE_MARKS = "ʹ'"
# Second markers: modifier letter double prime, double quote.
SECOND_MARKS = 'ʺ"'

DMS_RE = re.compile(
    rf"(?P<dir>[NESW])?\s*(?P<deg>\d+)[{DEGREE_MARKS}]"
    rf"(?:(?P<min>\d+)[{MINUTE_MARKS}])?"
    rf"(?:(?P<sec>\d+)[{SECOND_MARKS}])?",
    re.ASCII,
)
DECIMAL_RE = re.compile(r"\s*(?P<dir>[NESW])\s*(?P<deg>\d+(?:\.\d+)?)\s*", re.ASCII)

# "(...)." wrapper around catalog coordinate fields
WRAPPER_RE = re.compile(r"\(?([^)]+)\)?\.?\n?")

NEGATIVE_DIRECTIONS = frozenset({"W", "S"})


@dataclass(frozen=True)
class Token:
    direction: Optional[str]
    degrees: float
    minutes: float = 0.0
    seconds: float = 0.0

    def to_decimal(self) -> float:
        dec = self.degrees + self.minutes / 60 + self.seconds / 60 / 60
        if self.direction in NEGATIVE_DIRECTIONS:
            dec = -dec
        return dec


def _token_from_match(m: re.Match) -> Token:
    groups = m.groupdict()
    return Token(
        direction=groups.get("dir"),
        degrees=float(groups["deg"]),
        minutes=float(groups.get("min") or 0),
        seconds=float(groups.get("sec") or 0),
    )


def match_token(text: str) -> Optional[Token]:
    """
    Parse one directional coordinate token.

    Tries the degree/minute/second form first (anywhere in the text), then a
    bare decimal with a direction letter (whole text). Returns None when
    neither applies.
    """
    m = DMS_RE.search(text)
    if m:
        return _token_from_match(m)

    m = DECIMAL_RE.fullmatch(text)
    if m:
        return _token_from_match(m)

    return None


def convert_token(text: str) -> float:
    """
    Decimal degrees for a coordinate token; W and S are negative.

    Unparseable tokens give math.inf so the enclosing rectangle fails range
    validation instead of raising.
    """
    token = match_token(text)
    if token is None:
        logger.debug(f"Unparseable coordinate token: {text!r}")
        return math.inf
    return token.to_decimal()


def clean(raw: str) -> str:
    """
    Strip a "(...)" wrapper, a trailing period after it and one final newline.

    Returns the original string when the wrapper pattern does not apply.
    """
    m = WRAPPER_RE.fullmatch(raw)
    return m.group(1) if m else raw
