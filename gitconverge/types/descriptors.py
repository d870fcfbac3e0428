"""Declared desired state handed in by the resource framework."""

from dataclasses import dataclass, field


@dataclass
class RepositoryStatus:
    """Observed state written back by repository convergence."""

    clone_url: str | None = None


@dataclass
class RepositoryDescriptor:
    """
    Desired state of a repository owned by the authenticated account.

    Optional fields left as ``None`` are "unset": they are never sent in an
    edit, and fall back to the server defaults on create.
    """

    name: str
    namespace: str = "default"
    description: str | None = None
    private: bool | None = None
    issue_labels: str | None = None
    auto_init: bool | None = None
    template: bool | None = None
    gitignores: str | None = None
    license: str | None = None
    readme: str | None = None
    default_branch: str | None = None
    trust_model: str | None = None
    deletion_requested: bool = False
    status: RepositoryStatus = field(default_factory=RepositoryStatus)


@dataclass
class TokenStatus:
    """Observed state written back by token convergence."""

    token_id: int | None = None
    ready: bool = False
    secret_name: str | None = None


@dataclass
class TokenDescriptor:
    """Desired state of an access token declared in a namespace."""

    name: str
    namespace: str = "default"
    scopes: list[str] = field(default_factory=list)
    deletion_requested: bool = False
    status: TokenStatus = field(default_factory=TokenStatus)

    @property
    def remote_name(self) -> str:
        """Name of the token on the server.

        Tokens from every namespace share one server account, so the
        namespace is part of the name.
        """
        return f"{self.name}-{self.namespace}"
