"""Shared type aliases and unit helpers."""

from __future__ import annotations

import math
from typing import TypeAlias

# Latitude/longitude pair
LatLon: TypeAlias = tuple[float, float]

# JSON-like dict
JsonDict: TypeAlias = dict[str, object]


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return c * 9.0 / 5.0 + 32.0


def round_to(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves rounded up (toward +inf).

    ``round()`` uses banker's rounding, which would show 0.25 as 0.2.
    """
    p = 10 ** digits
    return math.floor(value * p + 0.5) / p
