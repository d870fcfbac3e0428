"""
Pytest plugin for gitconverge testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your conftest.py:

    pytest_plugins = ["gitconverge.testing.conftest"]
"""

from gitconverge.testing.fixtures import (
    mock_client,
    ready_handle,
    repository_descriptor,
    sample_access_token,
    sample_repository,
    sample_user,
    secret_store,
    token_descriptor,
)

__all__ = [
    "mock_client",
    "ready_handle",
    "secret_store",
    "sample_user",
    "sample_repository",
    "sample_access_token",
    "repository_descriptor",
    "token_descriptor",
]
