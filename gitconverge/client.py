"""
Authenticated Gitea client.

Aggregates the resource clients over one HTTP transport.
"""

from typing import Any

from gitconverge.clients import ReposClient, TokensClient, UsersClient
from gitconverge.config import DEFAULT_TIMEOUT
from gitconverge.logging import get_logger
from gitconverge.transport import HTTPTransport, RetryConfig

logger = get_logger()


class GiteaClient:
    """
    Client for the parts of the Gitea API used for convergence.

    Example:
        ```python
        from gitconverge import GiteaClient

        client = GiteaClient.connect(
            "http://gitea.gitea.svc:3000",
            username="nephio",
            password="secret",
        )
        me = client.users.get_my_user_info()
        repo = client.repos.get(me.username, "mgmt")
        ```
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize the client. No request is made.

        Args:
            base_url: Server URL
            username: Account used for basic authentication
            password: Password of that account
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior (optional)
        """
        self.base_url = base_url
        self.username = username

        self._transport = HTTPTransport(
            base_url=base_url,
            username=username,
            password=password,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.users = UsersClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.tokens = TokensClient(self._transport)

    @classmethod
    def connect(
        cls,
        base_url: str,
        username: str,
        password: str,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "GiteaClient":
        """
        Create a client and verify the server answers.

        Raises:
            GitConvergeError: If the server cannot be reached or rejects the request
        """
        client = cls(base_url, username, password, timeout, retry_config)
        try:
            version = client.users.server_version()
        except Exception:
            client.close()
            raise
        logger.info("Connected to git server %s (version %s)", base_url, version.version)
        return client

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GiteaClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
