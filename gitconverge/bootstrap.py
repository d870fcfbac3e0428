"""
Lazy, self-retrying construction of the git client.

The credential secret may be provisioned after this process starts, so the
bootstrap keeps trying until it succeeds or the shutdown event is set. Each
failed attempt is logged; there is no caller to report it to.

Example:
    ```python
    import threading

    from gitconverge.bootstrap import get_client

    shutdown = threading.Event()
    handle = get_client(shutdown, secret_store)
    if not handle.is_ready():
        ...  # requeue
    ```
"""

import threading
from collections.abc import Callable, Mapping

from gitconverge.client import GiteaClient
from gitconverge.config import RETRY_DELAY, BootstrapConfig
from gitconverge.exceptions import ConfigurationError
from gitconverge.handle import ClientHandle
from gitconverge.logging import get_logger
from gitconverge.secrets import SecretStore
from gitconverge.transport import RetryConfig

logger = get_logger("bootstrap")

ClientFactory = Callable[[BootstrapConfig, str, str], GiteaClient]


def connect_client(config: BootstrapConfig, username: str, password: str) -> GiteaClient:
    """Default factory: basic-auth client verified against the server."""
    return GiteaClient.connect(
        config.git_url,
        username=username,
        password=password,
        timeout=config.timeout,
        retry_config=RetryConfig(max_retries=config.max_retries),
    )


class ClientBootstrap:
    """
    Owns the single :class:`ClientHandle` and the thread that initialises it.

    The handle moves ``Uninitialized -> Initializing -> Ready``; a failed
    attempt leaves it ``Initializing`` and the next attempt starts after
    ``retry_delay`` seconds.
    """

    def __init__(
        self,
        client_factory: ClientFactory = connect_client,
        retry_delay: float = RETRY_DELAY,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.client_factory = client_factory
        self.retry_delay = retry_delay
        self._environ = environ
        self._lock = threading.Lock()
        self._handle: ClientHandle | None = None
        self._thread: threading.Thread | None = None

    @property
    def handle(self) -> ClientHandle | None:
        return self._handle

    def acquire(self, shutdown: threading.Event, secrets: SecretStore) -> ClientHandle:
        """
        Return the handle, creating it and starting its initialisation on first use.

        Args:
            shutdown: Event that stops the initialisation loop when set
            secrets: Store holding the credential secret

        Raises:
            ConfigurationError: If ``shutdown`` or ``secrets`` is None
        """
        if shutdown is None:
            raise ConfigurationError("failed creating git client, shutdown event cannot be None")
        if secrets is None:
            raise ConfigurationError("failed creating git client, secret store cannot be None")

        handle = self._handle
        if handle is None:
            with self._lock:
                # Another thread may have created it while we waited for the lock
                if self._handle is None:
                    handle = ClientHandle()
                    handle.mark_initializing()
                    self._thread = threading.Thread(
                        target=self._run,
                        args=(handle, shutdown, secrets),
                        name="gitconverge-bootstrap",
                        daemon=True,
                    )
                    self._handle = handle
                    self._thread.start()
                    logger.info("Git client handle created, initialisation started")
                else:
                    handle = self._handle
        return handle

    def join(self, timeout: float | None = None) -> None:
        """Wait for the initialisation thread to finish."""
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self, handle: ClientHandle, shutdown: threading.Event, secrets: SecretStore) -> None:
        attempt = 0
        while True:
            if shutdown.wait(self.retry_delay):
                logger.info("Shutdown requested, git client bootstrap stopped")
                return

            attempt += 1
            client = self._attempt(secrets, attempt)
            if client is None:
                continue

            if shutdown.is_set():
                client.close()
                logger.info("Shutdown requested, git client bootstrap stopped")
                return

            handle.publish(client)
            logger.info("Git client initialised after %d attempt(s)", attempt)
            return

    def _attempt(self, secrets: SecretStore, attempt: int) -> GiteaClient | None:
        """One connection attempt; returns None after logging a failure."""
        try:
            config = BootstrapConfig.from_env(self._environ)
        except ConfigurationError as e:
            logger.error("Cannot connect to git server (attempt %d): %s", attempt, e.message)
            return None

        try:
            secret = secrets.get(config.namespace, config.secret_name)
        except Exception as e:
            logger.error(
                "Cannot get secret %s/%s (attempt %d), create the git user secret: %s",
                config.namespace,
                config.secret_name,
                attempt,
                e,
            )
            return None

        try:
            username = secret.get_text("username")
            password = secret.get_text("password")
        except UnicodeDecodeError as e:
            logger.error(
                "Secret %s/%s holds credentials that are not valid UTF-8 (attempt %d): %s",
                config.namespace,
                config.secret_name,
                attempt,
                e,
            )
            return None
        if not username or not password:
            logger.error(
                "Secret %s/%s has no username/password (attempt %d)",
                config.namespace,
                config.secret_name,
                attempt,
            )
            return None

        try:
            return self.client_factory(config, username, password)
        except Exception as e:
            logger.error("Cannot authenticate to git server %s (attempt %d): %s", config.git_url, attempt, e)
            return None


_default_bootstrap = ClientBootstrap()


def get_client(shutdown: threading.Event, secrets: SecretStore) -> ClientHandle:
    """Return the process-wide client handle."""
    return _default_bootstrap.acquire(shutdown, secrets)
