from __future__ import annotations


class BrigClientError(Exception):
    """Base client error."""


class ConfigurationError(BrigClientError):
    """Token or base URL missing or unusable."""


class ValidationError(BrigClientError):
    """A required argument was empty."""


class NetworkError(BrigClientError):
    """Transport/network layer error."""


class DecodeError(BrigClientError):
    """A success response carried a body we could not decode."""


class ApiError(BrigClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        msg = super().__str__()
        if self.details:
            return f"{msg}: {self.details}"
        return msg


class AuthError(ApiError):
    """Auth-related API error."""
