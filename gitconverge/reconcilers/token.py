"""
Access token convergence.

Tokens declared in different namespaces share one server account, so the
remote token is named ``<name>-<namespace>``. The token value is only
returned by the server when the token is created; it is written to a secret
named after the descriptor right away.
"""

from gitconverge.exceptions import (
    ConvergenceError,
    GitConvergeError,
    NotFoundError,
    NotInitializedError,
    SecretPersistenceError,
)
from gitconverge.handle import GitClient
from gitconverge.logging import get_logger
from gitconverge.reconcilers.base import ReconcileResult, wire_value
from gitconverge.secrets import SecretStore
from gitconverge.types.descriptors import TokenDescriptor, TokenStatus
from gitconverge.types.secrets import SECRET_TYPE_BASIC_AUTH, Secret
from gitconverge.types.tokens import (
    AccessToken,
    AccessTokenScope,
    CreateAccessTokenOption,
    ListOptions,
)

logger = get_logger("reconcile")

DEFAULT_SCOPES = [AccessTokenScope.ALL.value]


class TokenReconciler:
    """Converges access token descriptors against the git server."""

    def __init__(self, client: GitClient, secrets: SecretStore, page_size: int = 50) -> None:
        self.client = client
        self.secrets = secrets
        self.page_size = page_size

    def reconcile(self, descriptor: TokenDescriptor) -> ReconcileResult:
        """
        Entry point for the resource framework.

        Requeues while the client is not ready; any other failure is raised.
        """
        if not self.client.is_ready():
            logger.info("Git client not ready, requeue token %s/%s", descriptor.namespace, descriptor.name)
            return ReconcileResult.retry_later()

        try:
            if descriptor.deletion_requested:
                self.delete(self.client, descriptor)
            else:
                self.create(self.client, descriptor)
        except NotInitializedError:
            return ReconcileResult.retry_later()
        return ReconcileResult.done()

    def create(self, client: GitClient, descriptor: TokenDescriptor) -> None:
        """
        Create the remote token unless one with the same name exists.

        Raises:
            ConvergenceError: If listing, owner lookup or creation fails
            SecretPersistenceError: If the token was created but its value
                was not returned or could not be stored; a later call sees the token by name and
                does not recreate it
            NotInitializedError: If the client is not ready
        """
        name = descriptor.remote_name

        existing = self._find(client, name)
        if existing is not None:
            logger.debug("Access token %s already exists (id %d)", name, existing.id)
            descriptor.status.token_id = existing.id
            descriptor.status.ready = True
            return

        try:
            owner = client.get_my_user_info()
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError("cannot resolve owning account") from e

        scopes = [wire_value(s) for s in descriptor.scopes] or list(DEFAULT_SCOPES)
        try:
            token = client.create_access_token(CreateAccessTokenOption(name=name, scopes=scopes))
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError(f"access token {name} create failed") from e

        logger.info("Access token %s created (id %d)", name, token.id)
        descriptor.status.token_id = token.id

        if not token.token:
            logger.error("Access token %s created (id %d) but the server returned no token value", name, token.id)
            raise SecretPersistenceError(
                f"server returned no value for access token {name}",
                token_name=name,
            )

        secret = Secret(
            namespace=descriptor.namespace,
            name=descriptor.name,
            data={
                "username": owner.username.encode("utf-8"),
                "password": token.token.encode("utf-8"),
            },
            type=SECRET_TYPE_BASIC_AUTH,
            owner=f"Token/{descriptor.name}",
        )
        try:
            self.secrets.apply(secret)
        except Exception as e:
            logger.error(
                "Access token %s exists on the server but its value could not be stored in secret %s/%s",
                name,
                secret.namespace,
                secret.name,
            )
            raise SecretPersistenceError(
                f"cannot store access token {name} in secret {secret.namespace}/{secret.name}",
                token_name=name,
            ) from e

        descriptor.status.secret_name = secret.name
        descriptor.status.ready = True

    def delete(self, client: GitClient, descriptor: TokenDescriptor) -> None:
        """
        Delete the remote token by id. A token that is already gone counts as deleted.

        The id recorded at creation is used; without one, the token is looked
        up by name.

        Raises:
            ConvergenceError: If the lookup or delete fails
            NotInitializedError: If the client is not ready
        """
        name = descriptor.remote_name
        token_id = descriptor.status.token_id
        if token_id is None:
            existing = self._find(client, name)
            if existing is None:
                logger.info("Access token %s already absent", name)
                descriptor.status = TokenStatus()
                return
            token_id = existing.id

        try:
            client.delete_access_token(token_id)
        except NotFoundError:
            logger.info("Access token %s (id %d) already absent", name, token_id)
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError(f"access token {name} delete failed") from e
        else:
            logger.info("Access token %s (id %d) deleted", name, token_id)

        descriptor.status = TokenStatus()

    def _find(self, client: GitClient, name: str) -> AccessToken | None:
        try:
            tokens = self._list_all(client)
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError("cannot list access tokens") from e

        for token in tokens:
            if token.name == name:
                return token
        return None

    def _list_all(self, client: GitClient) -> list[AccessToken]:
        """Collect tokens from every page of the listing."""
        tokens: list[AccessToken] = []
        options = ListOptions(page=1, page_size=self.page_size)
        while True:
            page = client.list_access_tokens(options)
            tokens.extend(page.items)
            next_page = page.next_page
            if not page.items or next_page is None or next_page <= options.page:
                return tokens
            options = ListOptions(page=next_page, page_size=self.page_size)
