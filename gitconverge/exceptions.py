"""gitconverge exception classes."""


class GitConvergeError(Exception):
    """Base exception for all gitconverge errors."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitConvergeError):
    """Raised when configuration is invalid or a required argument is missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class NotInitializedError(GitConvergeError):
    """Raised when a capability is used before the client handle is ready."""

    def __init__(self, message: str = "git client is not initialized") -> None:
        super().__init__("NOT_INITIALIZED", message)


class AuthenticationError(GitConvergeError):
    """Raised when the server rejects the credentials (401)."""

    pass


class AuthorizationError(GitConvergeError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(GitConvergeError):
    """Raised when a remote object does not exist (404)."""

    pass


class ConflictError(GitConvergeError):
    """Raised on conflicts, e.g. a repository or token name already taken."""

    pass


class RateLimitedError(GitConvergeError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = 429,
    ) -> None:
        super().__init__(code, message, status_code)
        self.retry_after = retry_after


class ValidationError(GitConvergeError):
    """Raised when the server rejects a request body (422 and other 4xx)."""

    pass


class ServerError(GitConvergeError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class SecretNotFoundError(GitConvergeError):
    """Raised by a secret store when the requested secret does not exist."""

    def __init__(self, namespace: str, name: str) -> None:
        super().__init__("SECRET_NOT_FOUND", f"secret {namespace}/{name} not found")
        self.namespace = namespace
        self.name = name


class ConvergenceError(GitConvergeError):
    """Raised when a reconciliation step fails.

    The remote cause is chained as ``__cause__``.
    """

    def __init__(self, message: str, code: str = "CONVERGENCE_FAILED") -> None:
        super().__init__(code, message)


class SecretPersistenceError(ConvergenceError):
    """Raised when a freshly created token could not be written to the secret store.

    The remote token exists at this point but its value is lost: the service
    never returns it again.
    """

    def __init__(self, message: str, token_name: str) -> None:
        super().__init__(message, code="SECRET_PERSISTENCE_FAILED")
        self.token_name = token_name
