"""HTTP API access."""

from .client import ApiAuthError, ApiClient, ApiError, ApiNotFoundError

__all__ = [
    "ApiAuthError",
    "ApiClient",
    "ApiError",
    "ApiNotFoundError",
]
