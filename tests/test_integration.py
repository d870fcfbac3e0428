"""
Integration tests for gitconverge.

These tests run against a real Gitea server and verify end-to-end convergence.
Set GITCONVERGE_INTEGRATION_TESTS=1 together with GIT_URL, GIT_USERNAME and
GIT_PASSWORD to run them.
"""

import os
import threading
import uuid

import pytest

from gitconverge.bootstrap import ClientBootstrap
from gitconverge.client import GiteaClient
from gitconverge.exceptions import AuthenticationError, NotFoundError
from gitconverge.handle import ClientHandle
from gitconverge.reconcilers import RepositoryReconciler, TokenReconciler
from gitconverge.testing import InMemorySecretStore, create_credentials_secret
from gitconverge.types.descriptors import RepositoryDescriptor, TokenDescriptor

# Skip all integration tests if a server is not available
pytestmark = pytest.mark.skipif(
    os.environ.get("GITCONVERGE_INTEGRATION_TESTS") != "1",
    reason="Integration tests require GITCONVERGE_INTEGRATION_TESTS=1 and a running Gitea server",
)


def get_base_url() -> str:
    return os.environ.get("GIT_URL", "http://localhost:3000")


def get_credentials() -> tuple[str, str]:
    return os.environ.get("GIT_USERNAME", "gitea"), os.environ.get("GIT_PASSWORD", "password")


def generate_unique_name(prefix: str) -> str:
    """Generate a unique name for test resources."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def client():
    username, password = get_credentials()
    with GiteaClient.connect(get_base_url(), username, password) as c:
        yield c


class TestConnect:
    def test_connect_and_identify(self, client: GiteaClient) -> None:
        user = client.users.get_my_user_info()

        assert user.username == get_credentials()[0]

    def test_bad_credentials(self) -> None:
        with pytest.raises(AuthenticationError):
            with GiteaClient(get_base_url(), "nobody", "wrong") as c:
                c.users.get_my_user_info()

    def test_bootstrap_from_secret(self) -> None:
        username, password = get_credentials()
        store = InMemorySecretStore()
        store.apply(create_credentials_secret(namespace="default", username=username, password=password))
        shutdown = threading.Event()
        bootstrap = ClientBootstrap(retry_delay=0.1, environ={"GIT_URL": get_base_url()})

        try:
            handle = bootstrap.acquire(shutdown, store)
            assert handle.wait_ready(30)
            assert handle.get_my_user_info().username == username
        finally:
            shutdown.set()


class TestRepositoryLifecycle:
    """Create -> Update -> Delete against the server."""

    def test_repository_lifecycle(self, client: GiteaClient) -> None:
        handle = ClientHandle()
        handle.publish(client)
        reconciler = RepositoryReconciler(handle)
        descriptor = RepositoryDescriptor(name=generate_unique_name("repo"), description="first")
        owner = client.users.get_my_user_info().username

        reconciler.reconcile(descriptor)
        assert descriptor.status.clone_url
        assert client.repos.get(owner, descriptor.name).description == "first"

        descriptor.description = "second"
        descriptor.private = True
        reconciler.reconcile(descriptor)
        repo = client.repos.get(owner, descriptor.name)
        assert repo.description == "second"
        assert repo.private is True

        descriptor.deletion_requested = True
        reconciler.reconcile(descriptor)
        reconciler.reconcile(descriptor)
        with pytest.raises(NotFoundError):
            client.repos.get(owner, descriptor.name)


class TestTokenLifecycle:
    """Create -> Create again -> Delete against the server."""

    def test_token_lifecycle(self, client: GiteaClient) -> None:
        handle = ClientHandle()
        handle.publish(client)
        store = InMemorySecretStore()
        reconciler = TokenReconciler(handle, store)
        descriptor = TokenDescriptor(name=generate_unique_name("token"), namespace="it")

        reconciler.reconcile(descriptor)
        reconciler.reconcile(descriptor)

        assert descriptor.status.ready
        secret = store.get("it", descriptor.name)
        assert secret.get_text("password")
        assert store.apply_count == 1

        descriptor.deletion_requested = True
        reconciler.reconcile(descriptor)
        names = [t.name for t in client.tokens.list().items]
        assert descriptor.remote_name not in names
