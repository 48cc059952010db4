"""JSON HTTP client for the dashboard backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiAuthError(ApiError):
    """Authentication or authorization failed (401/403)."""

    pass


class ApiNotFoundError(ApiError):
    """Resource not found (404)."""

    pass


class ApiClient:
    """Thin wrapper around httpx for JSON endpoints.

    Every call either returns decoded JSON or raises an ``ApiError``.
    The server's ``message`` field is used as the error text when present.
    """

    def __init__(
        self,
        base_url: str = "",
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Prefix for relative paths (empty to pass full URLs)
            token: Optional bearer token
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch_json(self, url: str) -> Any:
        """GET a URL and decode the JSON body."""
        return self._request("GET", url)

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(f"Request failed: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_success:
            if data is None and response.content:
                raise ApiError("Response is not valid JSON", response.status_code)
            return data

        message = _error_message(data) or f"Request failed with status {response.status_code}"
        if response.status_code in (401, 403):
            raise ApiAuthError(message, response.status_code)
        if response.status_code == 404:
            raise ApiNotFoundError(message, response.status_code)
        raise ApiError(message, response.status_code)


def _error_message(data: Any) -> str | None:
    """Extract the server's error message from a JSON body."""
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return None
