"""
Process-wide handle on the git server connection.

The handle exists before the connection does: reconcilers receive it
immediately and use :meth:`ClientHandle.is_ready` to decide whether to work or
requeue. The bootstrap publishes the authenticated client once, after which
the handle stays ready for the lifetime of the process.
"""

import threading
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from gitconverge.exceptions import NotInitializedError
from gitconverge.types.repos import CreateRepoOption, EditRepoOption, RemoteRepository
from gitconverge.types.response import Page
from gitconverge.types.tokens import AccessToken, CreateAccessTokenOption, ListOptions
from gitconverge.types.users import User

if TYPE_CHECKING:
    from gitconverge.client import GiteaClient


class ClientState(str, Enum):
    UNINITIALIZED = "Uninitialized"
    INITIALIZING = "Initializing"
    READY = "Ready"


class GitClient(Protocol):
    """Capability surface the reconcilers depend on."""

    def is_ready(self) -> bool: ...

    def get_my_user_info(self) -> User: ...

    def get_repo(self, owner: str, repo: str) -> RemoteRepository: ...

    def create_repo(self, option: CreateRepoOption) -> RemoteRepository: ...

    def edit_repo(self, owner: str, repo: str, option: EditRepoOption) -> RemoteRepository: ...

    def delete_repo(self, owner: str, repo: str) -> None: ...

    def list_access_tokens(self, options: ListOptions | None = None) -> Page[AccessToken]: ...

    def create_access_token(self, option: CreateAccessTokenOption) -> AccessToken: ...

    def delete_access_token(self, token_id: int) -> None: ...


class ClientHandle:
    """
    Lazily connected client.

    Every capability call before the handle is ready raises
    :class:`NotInitializedError`.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = ClientState.UNINITIALIZED
        self._client: "GiteaClient | None" = None
        self._ready = threading.Event()

    @property
    def state(self) -> ClientState:
        return self._state

    def is_ready(self) -> bool:
        """Non-blocking readiness probe."""
        return self._ready.is_set()

    def wait_ready(self, timeout: float | None = None) -> bool:
        """Block until the handle is ready or ``timeout`` expires."""
        return self._ready.wait(timeout)

    def mark_initializing(self) -> None:
        with self._lock:
            if self._state is ClientState.UNINITIALIZED:
                self._state = ClientState.INITIALIZING

    def publish(self, client: "GiteaClient") -> None:
        """
        Attach the authenticated client and become ready.

        Raises:
            RuntimeError: If a client was already published
        """
        with self._lock:
            if self._client is not None:
                raise RuntimeError("git client already published")
            self._client = client
            self._state = ClientState.READY
            self._ready.set()

    def _require(self) -> "GiteaClient":
        client = self._client
        if client is None:
            raise NotInitializedError(f"git client is not initialized (state: {self._state.value})")
        return client

    def get_my_user_info(self) -> User:
        return self._require().users.get_my_user_info()

    def get_repo(self, owner: str, repo: str) -> RemoteRepository:
        return self._require().repos.get(owner, repo)

    def create_repo(self, option: CreateRepoOption) -> RemoteRepository:
        return self._require().repos.create(option)

    def edit_repo(self, owner: str, repo: str, option: EditRepoOption) -> RemoteRepository:
        return self._require().repos.edit(owner, repo, option)

    def delete_repo(self, owner: str, repo: str) -> None:
        self._require().repos.delete(owner, repo)

    def list_access_tokens(self, options: ListOptions | None = None) -> Page[AccessToken]:
        return self._require().tokens.list(options)

    def create_access_token(self, option: CreateAccessTokenOption) -> AccessToken:
        return self._require().tokens.create(option)

    def delete_access_token(self, token_id: int) -> None:
        self._require().tokens.delete(token_id)

    def __repr__(self) -> str:
        return f"ClientHandle(state={self._state.value})"
