"""gitconverge testing utilities.

Provides a mock client, an in-memory secret store and fixtures for testing
code that drives the reconcilers.
"""

from gitconverge.testing.fixtures import (
    create_credentials_secret,
    create_mock_repository,
    create_mock_token,
    create_mock_user,
    create_ready_handle,
)
from gitconverge.testing.mock import MockCall, MockGiteaClient, MockResponse
from gitconverge.testing.secrets import InMemorySecretStore

__all__ = [
    # Mock client
    "MockGiteaClient",
    "MockCall",
    "MockResponse",
    # Secret store
    "InMemorySecretStore",
    # Helper functions
    "create_mock_user",
    "create_mock_repository",
    "create_mock_token",
    "create_credentials_secret",
    "create_ready_handle",
]
