"""Routing of postcodes and outward codes to postcodes.io request URLs."""

import httpx

from postcodesio.exceptions import URLBuildError

BASE_URL = "https://api.postcodes.io"

# Longest outward code is 4 characters ("ZZ99"), shortest full postcode is 5 ("Z9 9ZZ")
_MAX_OUTCODE_LENGTH = 4


def is_outcode(raw: str) -> bool:
    """Return True if *raw* is short enough to be an outward code only."""
    return len(raw) <= _MAX_OUTCODE_LENGTH


def resource_path(raw: str) -> str:
    """Return the API resource path for *raw*, e.g. 'SW1A' -> '/outcodes/SW1A'."""
    if is_outcode(raw):
        return f"/outcodes/{raw}"
    return f"/postcodes/{raw}"


def geocode_url(raw: str, base_url: str = BASE_URL) -> str:
    """
    Build the fully-qualified lookup URL for *raw*.

    The input is not validated or escaped beyond what httpx's URL parser
    does. Raises URLBuildError if the result is not a valid absolute URL.
    """
    try:
        url = httpx.URL(base_url.rstrip("/") + resource_path(raw))
    except httpx.InvalidURL as exc:
        raise URLBuildError(raw, str(exc)) from exc
    if not url.is_absolute_url:
        raise URLBuildError(raw, f"not an absolute URL: {url}")
    return str(url)
