"""Access-token-related data models."""

from dataclasses import dataclass, field
from enum import Enum


class AccessTokenScope(str, Enum):
    """Scopes an access token can be granted."""

    ALL = "all"

    REPO = "repo"
    REPO_STATUS = "repo:status"
    PUBLIC_REPO = "public_repo"

    ADMIN_ORG = "admin:org"
    WRITE_ORG = "write:org"
    READ_ORG = "read:org"

    ADMIN_PUBLIC_KEY = "admin:public_key"
    WRITE_PUBLIC_KEY = "write:public_key"
    READ_PUBLIC_KEY = "read:public_key"

    ADMIN_REPO_HOOK = "admin:repo_hook"
    WRITE_REPO_HOOK = "write:repo_hook"
    READ_REPO_HOOK = "read:repo_hook"

    ADMIN_ORG_HOOK = "admin:org_hook"
    ADMIN_USER_HOOK = "admin:user_hook"

    NOTIFICATION = "notification"

    USER = "user"
    READ_USER = "read:user"
    USER_EMAIL = "user:email"
    USER_FOLLOW = "user:follow"

    DELETE_REPO = "delete_repo"

    PACKAGE = "package"
    WRITE_PACKAGE = "write:package"
    READ_PACKAGE = "read:package"
    DELETE_PACKAGE = "delete:package"

    ADMIN_GPG_KEY = "admin:gpg_key"
    WRITE_GPG_KEY = "write:gpg_key"
    READ_GPG_KEY = "read:gpg_key"

    ADMIN_APPLICATION = "admin:application"
    WRITE_APPLICATION = "write:application"
    READ_APPLICATION = "read:application"

    SUDO = "sudo"


@dataclass
class AccessToken:
    """
    API access token.

    ``token`` holds the secret value and is only populated in the response to
    a create call; listings never include it.
    """

    id: int
    name: str
    scopes: list[str] = field(default_factory=list)
    token: str = ""
    token_last_eight: str = ""


@dataclass
class CreateAccessTokenOption:
    """Request body for creating an access token."""

    name: str
    scopes: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name, "scopes": list(self.scopes)}


@dataclass
class ListOptions:
    """Pagination options. Page numbering starts at 1."""

    page: int = 1
    page_size: int = 50

    def to_params(self) -> dict[str, int]:
        return {"page": self.page, "limit": self.page_size}
