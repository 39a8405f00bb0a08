"""
Async HTTP Transport for the GitHub REST API.

Handles authenticated HTTP communication and maps error responses onto
typed exceptions. Every request is attempted exactly once.
"""

import time
from typing import Any

import httpx

from cherrypick_bot.exceptions import (
    AuthenticationError,
    AuthorizationError,
    GitHubError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from cherrypick_bot.logging import log_http_request, log_http_response

GITHUB_API_VERSION = "2022-11-28"


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for GitHub.

    Handles:
    - Bearer token authentication
    - GitHub JSON media type and API version headers
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: GitHub access token
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests to stub GitHub)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single authenticated request.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/owner/name/pulls")
            params: Query parameters
            body: JSON request body (for POST/PATCH)

        Returns:
            Parsed JSON response (object or list)

        Raises:
            GitHubError: On API or connection errors
        """
        log_http_request(method, path, params=params, body=body)
        started = time.monotonic()

        try:
            response = await self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            path,
            elapsed_ms=(time.monotonic() - started) * 1000,
            request_id=response.headers.get("X-GitHub-Request-Id"),
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE",
                f"Unparseable response body for {method} {path}",
                response.status_code,
                response.headers.get("X-GitHub-Request-Id"),
            ) from e

    def _parse_error_response(self, response: httpx.Response) -> GitHubError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate GitHubError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        message = data.get("message") or f"HTTP {response.status_code}"
        errors = data.get("errors")
        if errors:
            details = "; ".join(
                e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors
            )
            message = f"{message} ({details})"

        request_id = response.headers.get("X-GitHub-Request-Id")
        status_code = response.status_code

        if status_code == 429 or (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(
                "RATE_LIMITED", message, retry_after, status_code, request_id
            )
        elif status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code, request_id)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, status_code, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code, request_id)
        else:
            return ValidationError("VALIDATION_FAILED", message, status_code, request_id)
