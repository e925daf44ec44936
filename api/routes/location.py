"""Location endpoints: geocoding, distances and distance units"""

import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field

from api.dependencies import get_geocoder, limiter
from core.config import settings
from services.location import (
    Distance,
    DistanceOption,
    GeocodeResult,
    GeocodingService,
    ProximityCandidate,
    ProximityMatch,
    calculate_distance,
    convert_distance_for_display,
    convert_distance_for_storage,
    extract_country_from_address,
    filter_by_distance,
    get_distance_options,
    get_distance_unit,
    get_service_radius_options,
    sort_by_distance,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/location", tags=["location"])


class GeocodeRequest(BaseModel):
    """Request to geocode an address"""
    address: str = Field(..., description="Address to geocode", min_length=1)


class DistanceResponse(BaseModel):
    """Distance between two points, stored and display forms"""
    distance_miles: float
    display: Distance


class UnitsResponse(BaseModel):
    """Distance unit settings for a country"""
    country_code: str
    unit: str
    distance_options: List[DistanceOption]
    service_radius_options: List[DistanceOption]


class ConvertResponse(BaseModel):
    value: float
    unit: str
    country_code: str


class NearbyRequest(BaseModel):
    """Filter candidates (e.g. contractor companies) by distance from a point"""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    max_distance: float = Field(..., gt=0, allow_inf_nan=False, description="Maximum distance in miles")
    candidates: List[ProximityCandidate]
    sort: bool = Field(False, description="Order results nearest first")


class NearbyResponse(BaseModel):
    matches: List[ProximityMatch]


async def _geocode_or_404(service: GeocodingService, address: str) -> GeocodeResult:
    result = await service.geocode(address)
    if not result:
        raise HTTPException(status_code=404, detail="Address not found")
    return result


@router.post("/geocode", response_model=GeocodeResult)
@limiter.limit(settings.GEOCODE_RATE_LIMIT)
async def geocode_address(
    request: Request,
    body: GeocodeRequest,
    service: GeocodingService = Depends(get_geocoder),
):
    """
    Forward geocoding: Convert address to coordinates

    Example: {"address": "1600 Pennsylvania Ave NW, Washington, DC"}
    """
    return await _geocode_or_404(service, body.address)


@router.get("/geocode", response_model=GeocodeResult)
@limiter.limit(settings.GEOCODE_RATE_LIMIT)
async def geocode_address_get(
    request: Request,
    address: str = Query(..., description="Address to geocode", min_length=1),
    service: GeocodingService = Depends(get_geocoder),
):
    """
    Forward geocoding: Convert address to coordinates (GET method)

    Example: /location/geocode?address=221B%20Baker%20Street%2C%20London
    """
    return await _geocode_or_404(service, address)


@router.get("/distance", response_model=DistanceResponse)
async def get_distance(
    lat1: float = Query(..., allow_inf_nan=False),
    lon1: float = Query(..., allow_inf_nan=False),
    lat2: float = Query(..., allow_inf_nan=False),
    lon2: float = Query(..., allow_inf_nan=False),
    country: Optional[str] = Query(None, description="Country code for the display unit"),
):
    """Great-circle distance between two points"""
    miles = calculate_distance(lat1, lon1, lat2, lon2)
    return DistanceResponse(
        distance_miles=miles,
        display=Distance(value=miles, unit="mi").for_country(country),
    )


@router.get("/units", response_model=UnitsResponse)
async def get_units(
    country: Optional[str] = Query(None, description="Country code"),
    address: Optional[str] = Query(None, description="Address to infer the country from"),
):
    """
    Unit label and dropdown options for a country.

    An explicit country wins over one inferred from the address.
    """
    country_code = country.upper() if country else extract_country_from_address(address)
    return UnitsResponse(
        country_code=country_code,
        unit=get_distance_unit(country_code),
        distance_options=get_distance_options(country_code),
        service_radius_options=get_service_radius_options(country_code),
    )


@router.get("/convert", response_model=ConvertResponse)
async def convert_distance(
    value: float = Query(..., ge=0, allow_inf_nan=False),
    country: Optional[str] = Query(None),
    direction: Literal["display", "storage"] = Query("display"),
):
    """Convert stored miles to display units, or a display value back to miles"""
    country_code = country.upper() if country else "US"
    if direction == "display":
        converted = convert_distance_for_display(value, country_code)
        unit = get_distance_unit(country_code)
    else:
        converted = convert_distance_for_storage(value, country_code)
        unit = "miles"
    return ConvertResponse(value=converted, unit=unit, country_code=country_code)


@router.post("/nearby", response_model=NearbyResponse)
async def get_nearby(body: NearbyRequest):
    """Candidates within max_distance of the point and within their own service radius"""
    matches = filter_by_distance(body.latitude, body.longitude, body.candidates, body.max_distance)
    if body.sort:
        matches = sort_by_distance(matches)
    return NearbyResponse(matches=matches)
