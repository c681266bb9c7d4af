"""postcodesio — Geocode UK postcodes and outward codes via postcodes.io."""

from postcodesio.client import PostcodesIO, geocode
from postcodesio.exceptions import (
    ErrorKind,
    GeocodeError,
    PostcodesIOError,
    ResponseError,
    ServiceError,
    URLBuildError,
)
from postcodesio.models import GeoPoint
from postcodesio.postcode import BASE_URL

__all__ = [
    "geocode",
    "PostcodesIO",
    "GeoPoint",
    "ErrorKind",
    "PostcodesIOError",
    "ServiceError",
    "URLBuildError",
    "ResponseError",
    "GeocodeError",
    "BASE_URL",
]
