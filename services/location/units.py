"""
Distance units across countries.

Distances are stored in miles. Metric countries see kilometres in the UI, so
values are converted at the storage/display boundary. Conversions round to
whole numbers and are therefore lossy.
"""

import logging
import math

from .distance import round_half_up
from .models import DistanceOption

logger = logging.getLogger(__name__)

# Countries that display kilometres instead of miles
METRIC_COUNTRIES = {"GB", "CA", "AU", "UK"}

KM_PER_MILE = 1.60934

# Curated dropdown tables; metric values are rounded approximations, not conversions
DISTANCE_OPTIONS_MILES = [5, 10, 25, 50]
DISTANCE_OPTIONS_KM = [8, 16, 40, 80]
SERVICE_RADIUS_OPTIONS_MILES = [5, 10, 15, 20, 25, 30, 35, 40, 45, 50]
SERVICE_RADIUS_OPTIONS_KM = [8, 16, 24, 32, 40, 48, 56, 64, 72, 80]

# Substrings that identify a country in a free-text address, checked in this order
COUNTRY_INDICATORS = {
    "GB": (
        "united kingdom", "england", "scotland", "wales", "northern ireland", ", uk", " uk ",
    ),
    "CA": ("canada", ", ca", " ca "),
    "AU": ("australia", ", au", " au "),
}
TRAILING_CODES = {"GB": " uk", "CA": " ca", "AU": " au"}
DEFAULT_COUNTRY = "US"


def _whole(value: float) -> int | float:
    """Nearest whole number; NaN and infinities are returned as they are"""
    rounded = round_half_up(value)
    return int(rounded) if math.isfinite(rounded) else rounded


def miles_to_km(miles: float) -> int | float:
    return _whole(miles * KM_PER_MILE)


def km_to_miles(km: float) -> int | float:
    return _whole(km / KM_PER_MILE)


def is_metric_country(country_code: str | None = None) -> bool:
    """True if the country displays distances in kilometres. Unknown or missing codes are imperial."""
    if not country_code:
        return False
    return country_code.upper() in METRIC_COUNTRIES


def get_distance_unit(country_code: str | None = None) -> str:
    return "km" if is_metric_country(country_code) else "miles"


def _options(values: list[int], country_code: str | None) -> list[DistanceOption]:
    unit = get_distance_unit(country_code)
    return [DistanceOption(value=value, label=f"{value} {unit}") for value in values]


def get_distance_options(country_code: str | None = None) -> list[DistanceOption]:
    """Options for the distance filter dropdown"""
    values = DISTANCE_OPTIONS_KM if is_metric_country(country_code) else DISTANCE_OPTIONS_MILES
    return _options(values, country_code)


def get_service_radius_options(country_code: str | None = None) -> list[DistanceOption]:
    """Options for a contractor's service radius"""
    values = SERVICE_RADIUS_OPTIONS_KM if is_metric_country(country_code) else SERVICE_RADIUS_OPTIONS_MILES
    return _options(values, country_code)


def convert_distance_for_display(stored_distance: float, country_code: str | None = None) -> float:
    """Stored miles -> the country's display unit"""
    return miles_to_km(stored_distance) if is_metric_country(country_code) else stored_distance


def convert_distance_for_storage(display_distance: float, country_code: str | None = None) -> float:
    """Display value in the country's unit -> stored miles"""
    return km_to_miles(display_distance) if is_metric_country(country_code) else display_distance


def _matches(address: str, country: str) -> bool:
    if any(indicator in address for indicator in COUNTRY_INDICATORS[country]):
        return True
    return address.endswith(TRAILING_CODES[country])


def extract_country_from_address(address: str | None = None) -> str:
    """
    Guess the country code from an address string.

    This is a substring heuristic, not a lookup: "Uk Lane" reads as the UK.
    Falls back to "US" when nothing matches.
    """
    if not address:
        return DEFAULT_COUNTRY

    address_lower = address.lower()
    matched = [country for country in COUNTRY_INDICATORS if _matches(address_lower, country)]

    if not matched:
        return DEFAULT_COUNTRY

    if len(matched) > 1:
        logger.warning(f"Address matches several countries {matched}, using {matched[0]}: {address}")

    return matched[0]
