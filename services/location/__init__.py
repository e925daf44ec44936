"""Location service package: geocoding, distances and distance units"""

from .cache import MemoryGeocodeCache, RedisGeocodeCache, normalize_address
from .distance import calculate_distance
from .models import Distance, DistanceOption, GeocodeResult, ProximityCandidate, ProximityMatch
from .proximity import filter_by_distance, sort_by_distance
from .service import GeocodingService, geocode_address, get_geocoding_service
from .units import (
    convert_distance_for_display,
    convert_distance_for_storage,
    extract_country_from_address,
    get_distance_options,
    get_distance_unit,
    get_service_radius_options,
    is_metric_country,
    km_to_miles,
    miles_to_km,
)

__all__ = [
    "Distance",
    "DistanceOption",
    "GeocodeResult",
    "GeocodingService",
    "MemoryGeocodeCache",
    "ProximityCandidate",
    "ProximityMatch",
    "RedisGeocodeCache",
    "calculate_distance",
    "convert_distance_for_display",
    "convert_distance_for_storage",
    "extract_country_from_address",
    "filter_by_distance",
    "geocode_address",
    "get_distance_options",
    "get_distance_unit",
    "get_geocoding_service",
    "get_service_radius_options",
    "is_metric_country",
    "km_to_miles",
    "miles_to_km",
    "normalize_address",
    "sort_by_distance",
]
