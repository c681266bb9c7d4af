"""Typed result models for postcodesio."""

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, field_validator

# Postcode lookups return a single name, outcode lookups a list of names.
Names = Optional[Union[str, list[str]]]


@dataclass(frozen=True)
class GeoPoint:
    """A geographic location as WGS84 latitude/longitude."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {"latitude": self.latitude, "longitude": self.longitude}


class Codes(BaseModel):
    """GSS codes for the administrative areas of a postcode."""

    admin_district: Optional[str] = None
    admin_county: Optional[str] = None
    admin_ward: Optional[str] = None
    parish: Optional[str] = None
    ccg: Optional[str] = None
    nuts: Optional[str] = None


class GeocodeResult(BaseModel):
    """The ``result`` object of a postcode or outcode lookup."""

    latitude: float = 0.0
    longitude: float = 0.0

    postcode: Optional[str] = None
    outcode: Optional[str] = None
    incode: Optional[str] = None
    quality: Optional[int] = None
    eastings: Optional[int] = None
    northings: Optional[int] = None
    nhs_ha: Optional[str] = None
    european_electoral_region: Optional[str] = None
    primary_care_trust: Optional[str] = None
    region: Optional[str] = None
    lsoa: Optional[str] = None
    msoa: Optional[str] = None
    ccg: Optional[str] = None
    nuts: Optional[str] = None
    codes: Optional[Codes] = None

    country: Names = None
    parliamentary_constituency: Names = None
    admin_district: Names = None
    parish: Names = None
    admin_county: Names = None
    admin_ward: Names = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def null_coordinate_as_zero(cls, value):
        # Postcodes without a grid reference come back with null coordinates
        return 0.0 if value is None else value


class ServiceEnvelope(BaseModel):
    """Outer JSON object of every postcodes.io response."""

    status: Optional[int] = None
    result: Optional[GeocodeResult] = None
    error: Optional[str] = None
