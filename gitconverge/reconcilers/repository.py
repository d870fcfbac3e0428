"""Repository convergence."""

from gitconverge.exceptions import (
    ConvergenceError,
    GitConvergeError,
    NotFoundError,
    NotInitializedError,
)
from gitconverge.handle import GitClient
from gitconverge.logging import get_logger
from gitconverge.reconcilers.base import ReconcileResult, wire_value
from gitconverge.types.descriptors import RepositoryDescriptor
from gitconverge.types.repos import CreateRepoOption, EditRepoOption
from gitconverge.types.users import User

logger = get_logger("reconcile")

# Descriptor fields the server lets us change after creation
EDITABLE_FIELDS = ("description", "private", "template", "default_branch")


def build_edit_option(descriptor: RepositoryDescriptor) -> EditRepoOption:
    """Edit request holding only the descriptor fields that are set."""
    option = EditRepoOption()
    for name in EDITABLE_FIELDS:
        value = getattr(descriptor, name)
        if value is not None:
            option.set(name, wire_value(value))
    return option


def build_create_option(descriptor: RepositoryDescriptor) -> CreateRepoOption:
    """Create request from every descriptor field, unset ones as server defaults."""
    return CreateRepoOption(
        name=descriptor.name,
        description=descriptor.description or "",
        private=bool(descriptor.private),
        issue_labels=descriptor.issue_labels or "",
        auto_init=bool(descriptor.auto_init),
        template=bool(descriptor.template),
        gitignores=descriptor.gitignores or "",
        license=descriptor.license or "",
        readme=descriptor.readme or "",
        default_branch=descriptor.default_branch or "",
        trust_model=wire_value(descriptor.trust_model) or "",
    )


class RepositoryReconciler:
    """
    Converges repository descriptors against the git server.

    Repositories are owned by the account the client is authenticated as.
    """

    def __init__(self, client: GitClient) -> None:
        self.client = client

    def reconcile(self, descriptor: RepositoryDescriptor) -> ReconcileResult:
        """
        Entry point for the resource framework.

        Requeues while the client is not ready; any other failure is raised.
        """
        if not self.client.is_ready():
            logger.info("Git client not ready, requeue repository %s", descriptor.name)
            return ReconcileResult.retry_later()

        try:
            if descriptor.deletion_requested:
                self.delete(self.client, descriptor)
            else:
                self.upsert(self.client, descriptor)
        except NotInitializedError:
            return ReconcileResult.retry_later()
        return ReconcileResult.done()

    def upsert(self, client: GitClient, descriptor: RepositoryDescriptor) -> None:
        """
        Create the repository, or edit it if it already exists.

        Raises:
            ConvergenceError: If the owner cannot be resolved, existence cannot be
                determined, or the create/edit call fails
            NotInitializedError: If the client is not ready
        """
        owner = self._owner(client)

        try:
            client.get_repo(owner.username, descriptor.name)
        except NotFoundError:
            self._create(client, descriptor)
            return
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError(
                f"cannot determine whether repository {owner.username}/{descriptor.name} exists"
            ) from e

        option = build_edit_option(descriptor)
        try:
            repo = client.edit_repo(owner.username, descriptor.name, option)
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError(f"repository {descriptor.name} update failed") from e

        logger.info(
            "Repository %s/%s updated (%s)",
            owner.username,
            descriptor.name,
            "no fields set" if option.is_empty() else ", ".join(sorted(option.fields)),
        )
        descriptor.status.clone_url = repo.clone_url

    def delete(self, client: GitClient, descriptor: RepositoryDescriptor) -> None:
        """
        Delete the repository. A repository that is already gone counts as deleted.

        Raises:
            ConvergenceError: If the owner cannot be resolved or the delete fails
            NotInitializedError: If the client is not ready
        """
        owner = self._owner(client)

        try:
            client.delete_repo(owner.username, descriptor.name)
        except NotFoundError:
            logger.info("Repository %s/%s already absent", owner.username, descriptor.name)
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError(f"repository {descriptor.name} delete failed") from e
        else:
            logger.info("Repository %s/%s deleted", owner.username, descriptor.name)

        descriptor.status.clone_url = None

    def _create(self, client: GitClient, descriptor: RepositoryDescriptor) -> None:
        try:
            repo = client.create_repo(build_create_option(descriptor))
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError(f"repository {descriptor.name} create failed") from e

        logger.info("Repository %s created", repo.full_name)
        descriptor.status.clone_url = repo.clone_url

    @staticmethod
    def _owner(client: GitClient) -> User:
        try:
            return client.get_my_user_info()
        except NotInitializedError:
            raise
        except GitConvergeError as e:
            raise ConvergenceError("cannot resolve owning account") from e
