"""
Pytest fixtures for gitconverge testing.

Provides common fixtures and factory helpers for testing code that drives the
reconcilers.
"""

from typing import Any, Generator

import pytest

from gitconverge.handle import ClientHandle
from gitconverge.testing.mock import MockGiteaClient
from gitconverge.testing.secrets import InMemorySecretStore
from gitconverge.types.descriptors import RepositoryDescriptor, TokenDescriptor
from gitconverge.types.repos import RemoteRepository
from gitconverge.types.secrets import Secret
from gitconverge.types.tokens import AccessToken
from gitconverge.types.users import User


# ============================================================================
# Factory helpers
# ============================================================================


def create_mock_user(**overrides: Any) -> User:
    """Create a User with test defaults."""
    defaults: dict[str, Any] = {
        "id": 1,
        "username": "gitea",
        "email": "gitea@example.com",
        "full_name": "Gitea Admin",
        "is_admin": True,
    }
    defaults.update(overrides)
    return User(**defaults)


def create_mock_repository(**overrides: Any) -> RemoteRepository:
    """Create a RemoteRepository with test defaults."""
    defaults: dict[str, Any] = {
        "name": "mgmt",
        "full_name": "gitea/mgmt",
        "clone_url": "http://gitea.test/gitea/mgmt.git",
        "private": False,
        "template": False,
        "description": "",
        "default_branch": "main",
        "html_url": "http://gitea.test/gitea/mgmt",
    }
    defaults.update(overrides)
    return RemoteRepository(**defaults)


def create_mock_token(**overrides: Any) -> AccessToken:
    """Create an AccessToken with test defaults (listing shape: no secret value)."""
    defaults: dict[str, Any] = {
        "id": 123,
        "name": "test-token-test-ns",
        "scopes": ["all"],
        "token": "",
        "token_last_eight": "0a1b2c3d",
    }
    defaults.update(overrides)
    return AccessToken(**defaults)


def create_credentials_secret(
    namespace: str = "default",
    name: str = "git-user-secret",
    username: str = "gitea",
    password: str = "password",
) -> Secret:
    """Create the secret the bootstrap reads credentials from."""
    return Secret(
        namespace=namespace,
        name=name,
        data={"username": username.encode("utf-8"), "password": password.encode("utf-8")},
    )


def create_ready_handle(client: MockGiteaClient | None = None) -> ClientHandle:
    """Create a handle that is already ready, backed by ``client`` (or a new mock)."""
    handle = ClientHandle()
    handle.publish(client or MockGiteaClient(username="gitea"))  # type: ignore[arg-type]
    return handle


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGiteaClient, None, None]:
    """
    Provide a MockGiteaClient authenticated as "gitea".

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.add("existing")
            ...
            assert mock_client.was_called("repos.edit")
        ```
    """
    client = MockGiteaClient(username="gitea")
    yield client
    client.reset()


@pytest.fixture
def ready_handle(mock_client: MockGiteaClient) -> ClientHandle:
    """Provide a ready ClientHandle backed by the mock_client fixture."""
    return create_ready_handle(mock_client)


@pytest.fixture
def secret_store() -> InMemorySecretStore:
    """Provide an empty in-memory secret store."""
    return InMemorySecretStore()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_user() -> User:
    """Provide a sample User object."""
    return create_mock_user()


@pytest.fixture
def sample_repository() -> RemoteRepository:
    """Provide a sample RemoteRepository object."""
    return create_mock_repository()


@pytest.fixture
def sample_access_token() -> AccessToken:
    """Provide a sample AccessToken object."""
    return create_mock_token()


@pytest.fixture
def repository_descriptor() -> RepositoryDescriptor:
    """Provide a repository descriptor with no optional fields set."""
    return RepositoryDescriptor(name="mgmt", namespace="default")


@pytest.fixture
def token_descriptor() -> TokenDescriptor:
    """Provide a token descriptor named test-token in namespace test-ns."""
    return TokenDescriptor(name="test-token", namespace="test-ns")
