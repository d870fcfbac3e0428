"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from gitconverge.types.repos import CreateRepoOption, EditRepoOption, RemoteRepository

if TYPE_CHECKING:
    from gitconverge.transport import HTTPTransport


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def _parse_repository(data: dict[str, Any]) -> RemoteRepository:
    return RemoteRepository(
        name=data["name"],
        full_name=data.get("full_name", data["name"]),
        clone_url=data.get("clone_url", ""),
        private=data.get("private", False),
        template=data.get("template", False),
        description=data.get("description") or "",
        default_branch=data.get("default_branch") or "",
        html_url=data.get("html_url", ""),
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, owner: str, repo: str) -> RemoteRepository:
        """
        Get a repository.

        Raises:
            NotFoundError: If the repository does not exist
        """
        data, _ = self.transport.request("GET", _repo_path(owner, repo))
        return _parse_repository(data)

    def create(self, option: CreateRepoOption) -> RemoteRepository:
        """
        Create a repository owned by the authenticated user.

        Raises:
            ConflictError: If a repository with that name already exists
            ValidationError: If the server rejects the options
        """
        data, _ = self.transport.request("POST", "/user/repos", body=option.to_payload())
        return _parse_repository(data)

    def edit(self, owner: str, repo: str, option: EditRepoOption) -> RemoteRepository:
        """
        Edit a repository's properties.

        Only the fields present in ``option`` are sent.

        Raises:
            NotFoundError: If the repository does not exist
        """
        data, _ = self.transport.request(
            "PATCH", _repo_path(owner, repo), body=option.to_payload()
        )
        return _parse_repository(data)

    def delete(self, owner: str, repo: str) -> None:
        """
        Delete a repository.

        Raises:
            NotFoundError: If the repository does not exist
        """
        self.transport.request("DELETE", _repo_path(owner, repo))
