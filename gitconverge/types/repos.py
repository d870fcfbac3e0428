"""Repository-related data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TrustModel(str, Enum):
    """Commit signature trust model of a repository."""

    DEFAULT = "default"
    COLLABORATOR = "collaborator"
    COMMITTER = "committer"
    COLLABORATOR_COMMITTER = "collaboratorcommitter"


@dataclass
class RemoteRepository:
    """Repository as observed on the git server."""

    name: str
    full_name: str
    clone_url: str
    private: bool = False
    template: bool = False
    description: str = ""
    default_branch: str = ""
    html_url: str = ""


@dataclass
class CreateRepoOption:
    """Full request body for creating a repository for the authenticated user."""

    name: str
    description: str = ""
    private: bool = False
    issue_labels: str = ""
    auto_init: bool = False
    template: bool = False
    gitignores: str = ""
    license: str = ""
    readme: str = ""
    default_branch: str = ""
    trust_model: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "private": self.private,
            "issue_labels": self.issue_labels,
            "auto_init": self.auto_init,
            "template": self.template,
            "gitignores": self.gitignores,
            "license": self.license,
            "readme": self.readme,
            "default_branch": self.default_branch,
            "trust_model": self.trust_model,
        }


@dataclass
class EditRepoOption:
    """
    Sparse edit of a repository's properties.

    Only fields explicitly present are sent; everything else is left as it is
    on the server. Presence is tracked by key, so ``False`` and ``""`` are
    real values here, not "unset".

    Example:
        ```python
        option = EditRepoOption()
        option.set("description", "mirror of upstream")
        option.set("private", False)
        option.to_payload()  # {"description": "mirror of upstream", "private": False}
        ```
    """

    EDITABLE_FIELDS = (
        "name",
        "description",
        "website",
        "private",
        "template",
        "has_issues",
        "has_wiki",
        "has_pull_requests",
        "default_branch",
        "archived",
    )

    fields: dict[str, Any] = field(default_factory=dict)

    def set(self, name: str, value: Any) -> "EditRepoOption":
        if name not in self.EDITABLE_FIELDS:
            raise ValueError(f"{name!r} is not an editable repository field")
        self.fields[name] = value
        return self

    def is_set(self, name: str) -> bool:
        return name in self.fields

    def is_empty(self) -> bool:
        return not self.fields

    def to_payload(self) -> dict[str, Any]:
        return dict(self.fields)
