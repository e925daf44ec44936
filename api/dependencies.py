from slowapi import Limiter
from slowapi.util import get_remote_address

from services.location import GeocodingService, get_geocoding_service

# Rate limiter - uses client IP address for identification
limiter = Limiter(key_func=get_remote_address)


def get_geocoder() -> GeocodingService:
    """Geocoding service dependency, overridable in tests"""
    return get_geocoding_service()
