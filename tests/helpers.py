"""Shared helpers for building httpx responses in tests."""

from typing import Any

import httpx

BASE_URL = "http://gitea.test"


def make_response(
    status_code: int,
    json_body: Any = None,
    headers: dict[str, str] | None = None,
    method: str = "GET",
    path: str = "/user",
) -> httpx.Response:
    """Build a real httpx.Response bound to a request."""
    kwargs: dict[str, Any] = {}
    if json_body is not None:
        kwargs["json"] = json_body
    return httpx.Response(
        status_code,
        headers=headers,
        request=httpx.Request(method, f"{BASE_URL}/api/v1{path}"),
        **kwargs,
    )
