"""Pydantic models for the location service"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DistanceUnit = Literal["mi", "km"]


class GeocodeResult(BaseModel):
    """Coordinates returned by the geocoder"""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class DistanceOption(BaseModel):
    """A single entry of a distance dropdown"""

    value: int
    label: str


class Distance(BaseModel):
    """
    A distance tagged with its unit.

    Storage is always in miles; kilometres only appear on the display side
    for metric countries.
    """

    model_config = ConfigDict(frozen=True)

    value: float
    unit: DistanceUnit = "mi"

    def to_miles(self) -> "Distance":
        from .units import km_to_miles

        if self.unit == "mi":
            return self
        return Distance(value=km_to_miles(self.value), unit="mi")

    def to_km(self) -> "Distance":
        from .units import miles_to_km

        if self.unit == "km":
            return self
        return Distance(value=miles_to_km(self.value), unit="km")

    def for_country(self, country_code: str | None = None) -> "Distance":
        """Express this distance in the display unit of a country"""
        from .units import is_metric_country

        return self.to_km() if is_metric_country(country_code) else self.to_miles()


class ProximityCandidate(BaseModel):
    """Something with a location and a service radius (in miles), e.g. a contractor's company"""

    id: str
    latitude: float | None = Field(None, allow_inf_nan=False)
    longitude: float | None = Field(None, allow_inf_nan=False)
    service_radius: float = Field(..., ge=0, allow_inf_nan=False, description="Service radius in miles")


class ProximityMatch(BaseModel):
    """A candidate that passed the distance filter"""

    id: str
    distance: float | None = Field(None, description="Distance in miles, None when the candidate has no coordinates")
