"""Neutral response envelope returned alongside domain data."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Response:
    """Status information kept from an HTTP response.

    Transport internals (headers, connection objects) are stripped; only what
    callers need to interpret a result survives.
    """

    status_code: int
    total_count: int | None = None
    next_page: int | None = None


@dataclass
class Page(Generic[T]):
    """One page of a paginated listing."""

    items: list[T] = field(default_factory=list)
    response: Response | None = None

    @property
    def next_page(self) -> int | None:
        if self.response is None:
            return None
        return self.response.next_page
