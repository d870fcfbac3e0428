"""
Bootstrap configuration read from the process environment.

Environment variables:
    GIT_URL: Base URL of the git server (required)
    GIT_NAMESPACE: Namespace holding the credential secret (optional,
        defaults to POD_NAMESPACE, then "default")
    GIT_SECRET_NAME: Name of the credential secret (optional, default: git-user-secret)
    GIT_TIMEOUT: Request timeout in seconds (optional, default: 30)
    GIT_MAX_RETRIES: Transport-level retries per request (optional, default: 0)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from gitconverge.exceptions import ConfigurationError

DEFAULT_SECRET_NAME = "git-user-secret"
DEFAULT_NAMESPACE = "default"
DEFAULT_TIMEOUT = 30.0
RETRY_DELAY = 5.0  # seconds between bootstrap attempts


@dataclass(frozen=True)
class BootstrapConfig:
    """Where the git server is and where its credentials live."""

    git_url: str
    namespace: str = DEFAULT_NAMESPACE
    secret_name: str = DEFAULT_SECRET_NAME
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = 0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BootstrapConfig":
        """
        Build the configuration from environment variables.

        Raises:
            ConfigurationError: If GIT_URL is missing or a numeric value is invalid
        """
        env = os.environ if environ is None else environ

        git_url = env.get("GIT_URL")
        if not git_url:
            raise ConfigurationError("GIT_URL environment variable not set")

        namespace = env.get("GIT_NAMESPACE") or env.get("POD_NAMESPACE") or DEFAULT_NAMESPACE
        secret_name = env.get("GIT_SECRET_NAME") or DEFAULT_SECRET_NAME

        try:
            timeout = float(env.get("GIT_TIMEOUT", DEFAULT_TIMEOUT))
            max_retries = int(env.get("GIT_MAX_RETRIES", 0))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        if timeout <= 0:
            raise ConfigurationError(f"GIT_TIMEOUT must be positive, got {timeout}")
        if max_retries < 0:
            raise ConfigurationError(f"GIT_MAX_RETRIES must not be negative, got {max_retries}")

        return cls(
            git_url=git_url,
            namespace=namespace,
            secret_name=secret_name,
            timeout=timeout,
            max_retries=max_retries,
        )
