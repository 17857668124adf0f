"""Error taxonomy for the outage proxy.

Client errors (bad coordinates, bad test mode) map to 400; upstream and
payload errors map to 500. All of them are converted to an ``ErrorResponse``
at the application boundary in ``main.py``.
"""


class OutageProxyError(Exception):
    """Base exception for all outage proxy errors."""
    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidCoordinatesError(OutageProxyError):
    """Raised when lat/lon query parameters are missing or malformed."""
    status_code = 400


class OutsideServiceAreaError(OutageProxyError):
    """Raised when coordinates fall outside the BC Hydro service area."""
    status_code = 400


class InvalidTestModeError(OutageProxyError):
    """Raised when test mode is enabled but the requested fixture is unknown."""
    status_code = 400


class UpstreamFetchError(OutageProxyError):
    """Raised when the BC Hydro feed returns non-2xx or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, details={"upstream_status": status_code})
        self.upstream_status = status_code


class MalformedDataError(OutageProxyError):
    """Raised when the upstream body is not a JSON array of outages."""
