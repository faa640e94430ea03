"""Data models for the Actions event payload."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class Account(BaseModel):
    """A GitHub user or organization as it appears in webhook payloads."""

    login: str


class ItemPayload(BaseModel):
    """The issue or pull_request object of an event payload."""

    number: int = Field(..., gt=0)
    node_id: str = Field(..., min_length=1)
    assignees: list[Account] = Field(default_factory=list)


class RepositoryPayload(BaseModel):
    """The repository object of an event payload."""

    owner: Account


class EventPayload(BaseModel):
    """Subset of an issues / pull_request event payload.

    Unknown keys are ignored; payloads carry far more than is read here.
    """

    issue: ItemPayload | None = None
    pull_request: ItemPayload | None = None
    repository: RepositoryPayload | None = None


@dataclass(frozen=True)
class TriggerEvent:
    """The issue or pull request that fired the workflow.

    Attributes:
        number: Issue or pull request number.
        node_id: Global node ID of the issue or pull request.
        assignees: Logins of the current assignees (may be empty).
        repository_owner_login: Login of the repository owner, if present.
    """

    number: int
    node_id: str
    assignees: tuple[str, ...] = field(default_factory=tuple)
    repository_owner_login: str | None = None

    @property
    def is_assigned(self) -> bool:
        """Whether the item has at least one assignee."""
        return len(self.assignees) > 0
