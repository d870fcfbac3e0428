"""gitconverge resource clients."""

from gitconverge.clients.repos import ReposClient
from gitconverge.clients.tokens import TokensClient
from gitconverge.clients.users import UsersClient

__all__ = [
    "UsersClient",
    "ReposClient",
    "TokensClient",
]
