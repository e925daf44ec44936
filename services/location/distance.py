"""
Distance Calculations for Location Services

Haversine formula for great-circle distance between two lat/lon points.
"""

import math

EARTH_RADIUS_MILES = 3959


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like JavaScript's Math.round (halves go up, not to even). NaN and infinities pass through."""
    factor = 10 ** digits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate great-circle distance between two points in miles.

    Coordinates are not range-checked. The result is rounded to one decimal place,
    or NaN when a coordinate (or their difference) is not finite.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    if not all(math.isfinite(v) for v in (lat1, lon1, lat2, lon2, d_lat, d_lon)):
        return math.nan

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2)
    # Rounding error can push a just outside [0, 1] near antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round_half_up(EARTH_RADIUS_MILES * c, 1)
