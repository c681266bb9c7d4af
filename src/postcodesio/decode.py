"""Decoding of postcodes.io response bodies."""

import httpx
from pydantic import ValidationError

from postcodesio.exceptions import PostcodesIOError, ResponseError, ServiceError
from postcodesio.models import GeocodeResult, ServiceEnvelope


def read_body(response: httpx.Response) -> bytes:
    """Read the whole response body. Raises ResponseError on I/O failure."""
    try:
        return response.read()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        raise ResponseError(f"could not read http response body: {exc}") from exc


def decode_payload(body: bytes) -> GeocodeResult:
    """
    Decode a 200 response body into the lookup result.

    An empty body is an empty result, not an error. Even with an HTTP 200,
    an ``error`` message or a non-200 ``status`` inside the envelope is
    raised: the embedded status wins if the two disagree.
    """
    if not body.strip():
        return GeocodeResult()

    try:
        envelope = ServiceEnvelope.model_validate_json(body)
    except ValidationError as exc:
        raise ResponseError(f"could not decode response body: {exc}") from exc

    if envelope.error:
        raise PostcodesIOError(envelope.error)
    if envelope.status is not None and envelope.status != 200:
        raise ServiceError.from_status(envelope.status)

    return envelope.result or GeocodeResult()


def decode_response(response: httpx.Response) -> GeocodeResult:
    """Read and decode the body of a 200 response."""
    return decode_payload(read_body(response))
