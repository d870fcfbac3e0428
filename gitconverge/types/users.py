"""User-related data models."""

from dataclasses import dataclass


@dataclass
class User:
    """The account the client is authenticated as."""

    id: int
    username: str  # "login" on the wire
    email: str | None = None
    full_name: str | None = None
    is_admin: bool = False


@dataclass
class ServerVersion:
    """Version reported by the git server."""

    version: str
