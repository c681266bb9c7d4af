"""PostcodesIO client — the main entry point for the library."""

from __future__ import annotations

import logging

import httpx

from postcodesio.decode import decode_response
from postcodesio.exceptions import GeocodeError, PostcodesIOError, ServiceError
from postcodesio.models import GeoPoint
from postcodesio.postcode import BASE_URL, geocode_url
from postcodesio._http import _Session

logger = logging.getLogger(__name__)

Timeout = float | httpx.Timeout | None


class PostcodesIO:
    """
    Geocoder for UK postcodes and outward codes backed by postcodes.io.

    Holds no per-call state, so one instance can serve many threads. Pass
    *client* to reuse an existing httpx.Client (it will not be closed
    here); *timeout* applies only to the client this instance creates.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        *,
        client: httpx.Client | None = None,
        timeout: Timeout = None,
    ):
        self._base_url = base_url
        self._session = _Session(client, timeout)

    # ── Public API ────────────────────────────────────────────────

    def geocode(self, postcode: str, *, timeout: Timeout = None) -> GeoPoint:
        """
        Return the coordinates of a UK postcode or outward code.

        Inputs longer than 4 characters are looked up as full postcodes,
        shorter ones as outward codes. Every failure is raised as a
        GeocodeError chained from the error of the stage that failed.
        """
        try:
            url = geocode_url(postcode, self._base_url)
            logger.debug("GET %s", url)
            response = self._session.get(url, timeout=timeout)
        except (PostcodesIOError, httpx.HTTPError) as exc:
            raise GeocodeError(postcode, exc) from exc

        try:
            logger.debug("%s responded %d", url, response.status_code)
            if response.status_code != 200:
                raise ServiceError.from_status(response.status_code)
            result = decode_response(response)
        except PostcodesIOError as exc:
            raise GeocodeError(postcode, exc) from exc
        finally:
            response.close()

        return GeoPoint(latitude=result.latitude, longitude=result.longitude)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        self._session.close()

    def __enter__(self) -> PostcodesIO:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def geocode(
    postcode: str,
    *,
    timeout: Timeout = None,
    client: httpx.Client | None = None,
) -> GeoPoint:
    """Geocode *postcode* with a one-off PostcodesIO instance."""
    with PostcodesIO(client=client) as api:
        return api.geocode(postcode, timeout=timeout)
