"""Custom exception hierarchy for pyswapi."""

from __future__ import annotations


class SwapiError(Exception):
    """Base exception for all pyswapi errors."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class SwapiConfigError(SwapiError):
    """Invalid or missing configuration."""


class SwapiNetworkError(SwapiError):
    """Connection, DNS or TLS failure before a response was received."""


class SwapiHttpError(SwapiError):
    """Remote service answered with a status code >= 400."""

    def __init__(self, message: str, *, status_code: int, endpoint: str = "") -> None:
        self.status_code = status_code
        super().__init__(message, endpoint=endpoint)


class SwapiTimeoutError(SwapiError):
    """No complete response within the configured timeout."""


class SwapiParseError(SwapiError):
    """Response body is not valid JSON or does not have the expected shape."""
