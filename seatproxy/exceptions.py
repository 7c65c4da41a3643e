"""Exception hierarchy for the seat proxy."""


class SeatProxyError(Exception):
    """Base exception for all seat proxy errors."""

    status_code: int = 500


class ConfigurationError(SeatProxyError):
    """Raised when the request scope or tenant cannot be resolved."""

    status_code = 400


class AuthenticationError(SeatProxyError):
    """Raised when live mode is requested without credentials."""

    status_code = 401


class UpstreamFetchError(SeatProxyError):
    """Raised when a GitHub REST call for seats fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code or 500


class SeatParseError(SeatProxyError):
    """Raised when a raw seat object is missing required fields."""


class EnrichmentError(SeatProxyError):
    """Raised when the GraphQL email lookup fails."""
