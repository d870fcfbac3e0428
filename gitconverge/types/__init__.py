"""gitconverge type definitions.

This module exports all data model types used by the package.
"""

from gitconverge.types.descriptors import (
    RepositoryDescriptor,
    RepositoryStatus,
    TokenDescriptor,
    TokenStatus,
)
from gitconverge.types.repos import (
    CreateRepoOption,
    EditRepoOption,
    RemoteRepository,
    TrustModel,
)
from gitconverge.types.response import Page, Response
from gitconverge.types.secrets import Secret
from gitconverge.types.tokens import (
    AccessToken,
    AccessTokenScope,
    CreateAccessTokenOption,
    ListOptions,
)
from gitconverge.types.users import ServerVersion, User

__all__ = [
    # Envelope
    "Response",
    "Page",
    # User types
    "User",
    "ServerVersion",
    # Repository types
    "RemoteRepository",
    "CreateRepoOption",
    "EditRepoOption",
    "TrustModel",
    # Token types
    "AccessToken",
    "AccessTokenScope",
    "CreateAccessTokenOption",
    "ListOptions",
    # Secrets
    "Secret",
    # Descriptors
    "RepositoryDescriptor",
    "RepositoryStatus",
    "TokenDescriptor",
    "TokenStatus",
]
