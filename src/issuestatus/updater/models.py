"""Data models for the status updater."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UpdateStatus(str, Enum):
    """How a run ended."""

    UPDATED = "updated"
    SKIPPED_ASSIGNED = "skipped_assigned"
    SKIPPED_NOT_OPEN = "skipped_not_open"


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of a status update run.

    Attributes:
        status: How the run ended.
        item_number: Issue or pull request number.
        field_name: Status reported after the update; None when skipped.
        reason: Human readable summary.
    """

    status: UpdateStatus
    item_number: int
    field_name: str | None = None
    reason: str = ""

    @property
    def updated(self) -> bool:
        return self.status is UpdateStatus.UPDATED
