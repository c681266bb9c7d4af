"""Error kinds and the exception hierarchy for postcodesio."""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failures reported by postcodes.io."""

    NOT_FOUND = "Postcode Not Found"
    BAD_REQUEST = "Bad Request"
    SERVER_ERROR = "Server Error"
    NO_RESULTS = "No Results"
    MULTIPLE_RESULTS = "Multiple Results"
    INVALID_ERROR = "Invalid Error"

    def describe(self) -> str:
        """Human-readable message for this kind."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_status(cls, code: int) -> "ErrorKind":
        """Classify an HTTP (or embedded payload) status code."""
        return _STATUS_KINDS.get(code, cls.INVALID_ERROR)


_DESCRIPTIONS = {
    ErrorKind.NOT_FOUND: "postcodes.io could not find the requested information (404)",
    ErrorKind.BAD_REQUEST: "postcodes.io rejected the request (400)",
    ErrorKind.SERVER_ERROR: "postcodes.io encountered an error (500)",
    ErrorKind.NO_RESULTS: "postcodes.io returned no results for the request",
    ErrorKind.MULTIPLE_RESULTS: "postcodes.io returned multiple results for the request",
    ErrorKind.INVALID_ERROR: (
        "Invalid Error: Please report to postcodesio package maintainer"
    ),
}

_STATUS_KINDS = {
    400: ErrorKind.BAD_REQUEST,
    404: ErrorKind.NOT_FOUND,
    500: ErrorKind.SERVER_ERROR,
}


class PostcodesIOError(Exception):
    """Base exception for all postcodesio errors."""


class URLBuildError(PostcodesIOError):
    """The postcode could not be turned into a valid request URL."""

    def __init__(self, postcode: str, detail: str):
        self.postcode = postcode
        super().__init__(f"could not build request URL for {postcode!r}: {detail}")


class ServiceError(PostcodesIOError):
    """postcodes.io answered with a non-200 status."""

    def __init__(self, kind: ErrorKind, status: int | None = None):
        self.kind = kind
        self.status = status
        super().__init__(kind.describe())

    @classmethod
    def from_status(cls, status: int) -> "ServiceError":
        return cls(ErrorKind.from_status(status), status)


class ResponseError(PostcodesIOError):
    """The response body could not be read or decoded."""


class GeocodeError(PostcodesIOError):
    """A geocode call failed; wraps the error raised by the failing stage."""

    PREFIX = "postcodes.io: could not geocode postcode: "

    def __init__(self, postcode: str, cause: Exception):
        self.postcode = postcode
        self.cause = cause
        super().__init__(f"{self.PREFIX}{cause}")

    @property
    def kind(self) -> ErrorKind | None:
        """The classified kind when the cause was a service status error."""
        if isinstance(self.cause, ServiceError):
            return self.cause.kind
        return None
