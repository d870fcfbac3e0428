"""Users resource client."""

from typing import TYPE_CHECKING, Any

from gitconverge.types.users import ServerVersion, User

if TYPE_CHECKING:
    from gitconverge.transport import HTTPTransport


def _parse_user(data: dict[str, Any]) -> User:
    return User(
        id=data["id"],
        username=data["login"],
        email=data.get("email"),
        full_name=data.get("full_name"),
        is_admin=data.get("is_admin", False),
    )


class UsersClient:
    """Client for the authenticated account and server metadata."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get_my_user_info(self) -> User:
        """
        Get the account the client is authenticated as.

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        data, _ = self.transport.request("GET", "/user")
        return _parse_user(data)

    def server_version(self) -> ServerVersion:
        """Get the version of the server; doubles as a connectivity check."""
        data, _ = self.transport.request("GET", "/version")
        return ServerVersion(version=data.get("version", ""))
