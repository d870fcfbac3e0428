"""Contract of the external secret store."""

from typing import Protocol

from gitconverge.types.secrets import Secret


class SecretStore(Protocol):
    """
    Namespaced secret storage.

    Backends raise :class:`~gitconverge.exceptions.SecretNotFoundError` from
    :meth:`get` when the secret does not exist; any other failure propagates
    as raised by the backend.
    """

    def get(self, namespace: str, name: str) -> Secret: ...

    def apply(self, secret: Secret) -> None:
        """Create the secret, or replace its data and type if it exists."""
        ...
