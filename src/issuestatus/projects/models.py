"""Data models for GitHub Projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OwnerType(str, Enum):
    """Account type that owns a project board."""

    ORGANIZATION = "organization"
    USER = "user"

    @property
    def query_field(self) -> str:
        """Root GraphQL field used to look up the owner."""
        return self.value


@dataclass(frozen=True)
class ProjectReference:
    """A project board as identified by its URL."""

    owner_type: OwnerType
    owner_name: str
    project_number: int


@dataclass(frozen=True)
class StatusFieldState:
    """Current Status of an item in a project.

    Attributes:
        status_name: Name of the selected Status option.
        field_id: Node ID of the Status field.
        item_id: Node ID of the project item.
        options: Status option name -> option ID.
    """

    status_name: str
    field_id: str
    item_id: str
    options: dict[str, str] = field(default_factory=dict)
