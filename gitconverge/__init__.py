"""gitconverge - converge declared repositories and access tokens against a Gitea server."""

from gitconverge.bootstrap import ClientBootstrap, get_client
from gitconverge.client import GiteaClient
from gitconverge.config import BootstrapConfig
from gitconverge.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    ConvergenceError,
    GitConvergeError,
    NotFoundError,
    NotInitializedError,
    RateLimitedError,
    SecretNotFoundError,
    SecretPersistenceError,
    ServerError,
    ValidationError,
)
from gitconverge.handle import ClientHandle, ClientState, GitClient
from gitconverge.logging import configure_logging, get_logger
from gitconverge.reconcilers import (
    ReconcileResult,
    RepositoryReconciler,
    TokenReconciler,
)
from gitconverge.secrets import SecretStore
from gitconverge.transport import HTTPTransport, RetryConfig
from gitconverge.types import (
    RepositoryDescriptor,
    RepositoryStatus,
    Secret,
    TokenDescriptor,
    TokenStatus,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Bootstrap and handle
    "ClientBootstrap",
    "get_client",
    "ClientHandle",
    "ClientState",
    "GitClient",
    "BootstrapConfig",
    # Client
    "GiteaClient",
    # Reconcilers
    "RepositoryReconciler",
    "TokenReconciler",
    "ReconcileResult",
    # Descriptors
    "RepositoryDescriptor",
    "RepositoryStatus",
    "TokenDescriptor",
    "TokenStatus",
    # Secrets
    "Secret",
    "SecretStore",
    # Exceptions
    "GitConvergeError",
    "ConfigurationError",
    "NotInitializedError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "SecretNotFoundError",
    "ConvergenceError",
    "SecretPersistenceError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
