from .client import BrigClient
from .errors import (
    ApiError,
    AuthError,
    BrigClientError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    ValidationError,
)
from .models import LinkLookup, ShortLink

__all__ = [
    "BrigClient",
    "ApiError",
    "AuthError",
    "BrigClientError",
    "ConfigurationError",
    "DecodeError",
    "NetworkError",
    "ValidationError",
    "LinkLookup",
    "ShortLink",
]
