"""
HTTP Transport for the Gitea REST API.

Handles HTTP communication with basic authentication, optional retry logic
and translation of error responses into typed exceptions.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from gitconverge.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    GitConvergeError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from gitconverge.logging import log_http_request, log_http_response
from gitconverge.types.response import Response

API_PREFIX = "/api/v1"


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer for the Gitea API.

    Handles:
    - Basic authentication (token and user endpoints only accept basic auth)
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    - Pagination metadata from Link / X-Total-Count headers
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Server URL (e.g., "http://gitea.gitea.svc:3000")
            username: Account used for basic authentication
            password: Password of that account
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url + API_PREFIX,
            timeout=timeout,
            auth=httpx.BasicAuth(username, password),
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> tuple[Any, Response]:
        """
        Make an authenticated request.

        Args:
            method: HTTP method
            path: API path below /api/v1 (e.g., "/user/repos")
            params: Query parameters
            body: JSON request body

        Returns:
            Parsed JSON body (None for empty responses) and the response envelope

        Raises:
            GitConvergeError: On API errors
        """
        def make_request() -> httpx.Response:
            log_http_request(method, self.base_url + API_PREFIX + path, params, body)
            return self._client.request(method, path, params=params, json=body)

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> tuple[Any, Response]:
        """
        Execute a request with automatic retry on retryable errors.

        Raises:
            GitConvergeError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.perf_counter()
                response = request_fn()
                elapsed_ms = (time.perf_counter() - started) * 1000

                if response.status_code < 400:
                    data = self._parse_body(response)
                    log_http_response(response.status_code, str(response.url), data, elapsed_ms)
                    return data, self._build_envelope(response)

                log_http_response(response.status_code, str(response.url), None, elapsed_ms)
                error = self._parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        if last_error:
            if isinstance(last_error, GitConvergeError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """Determine if a request should be retried."""
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE",
                f"Response from {response.url} is not valid JSON",
                response.status_code,
            ) from e

    @staticmethod
    def _build_envelope(response: httpx.Response) -> Response:
        """Keep the status and pagination metadata of a response."""
        total_count: int | None = None
        total_header = response.headers.get("X-Total-Count")
        if total_header is not None:
            try:
                total_count = int(total_header)
            except ValueError:
                total_count = None

        next_page: int | None = None
        next_link = response.links.get("next", {}).get("url")
        if next_link:
            page = httpx.URL(next_link).params.get("page")
            if page is not None and page.isdigit():
                next_page = int(page)

        return Response(
            status_code=response.status_code,
            total_count=total_count,
            next_page=next_page,
        )

    def _parse_error_response(self, response: httpx.Response) -> GitConvergeError:
        """
        Parse an error response into a typed exception.

        Gitea error bodies look like ``{"message": "...", "url": "..."}``;
        validation failures may carry an ``errors`` list instead.
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        errors = data.get("errors")
        if errors:
            message = f"{message}: {'; '.join(str(e) for e in errors)}"

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code)
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, status_code)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code)
        elif status_code == 409:
            return ConflictError("CONFLICT", message, status_code)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError("RATE_LIMITED", message, retry_after, status_code)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code)
        else:
            return ValidationError("VALIDATION_ERROR", message, status_code)
