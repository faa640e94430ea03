"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from issuestatus.actions import TriggerEvent
from issuestatus.config import Configuration
from issuestatus.projects import ProjectReference, StatusFieldState


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the live GitHub API (local only)")


@dataclass
class FakeProjectsClient:
    """Scriptable stand-in for GitHubProjectsClient.

    Each attribute is returned (or raised, if it is an exception) by the
    matching call; every call is recorded in ``calls``.
    """

    project_id: Any = "PVT_project"
    status_field: Any = field(
        default_factory=lambda: StatusFieldState(
            status_name="Todo",
            field_id="PVTSSF_status",
            item_id="PVTI_item",
            options={"Todo": "opt_todo", "In Progress": "opt_progress", "Done": "opt_done"},
        )
    )
    field_name: Any = "In Progress"
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def _answer(self, value: Any) -> Any:
        if isinstance(value, Exception):
            raise value
        return value

    def get_project_id(self, project: ProjectReference) -> str:
        self.calls.append(("get_project_id", (project,)))
        return self._answer(self.project_id)

    def get_status_field(self, node_id: str, project_id: str) -> StatusFieldState:
        self.calls.append(("get_status_field", (node_id, project_id)))
        return self._answer(self.status_field)

    def set_status(self, project_id: str, item_id: str, field_id: str, option_id: str) -> str:
        self.calls.append(("set_status", (project_id, item_id, field_id, option_id)))
        return self._answer(self.field_name)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def fake_client() -> FakeProjectsClient:
    """A fake projects client with an item in Todo."""
    return FakeProjectsClient()


@pytest.fixture
def config() -> Configuration:
    """Configuration moving Todo items to In Progress."""
    return Configuration(
        project_url="https://github.com/orgs/acme/projects/7",
        github_token="test-token",
        new_status="In Progress",
        open_status="Todo",
    )


@pytest.fixture
def unassigned_issue() -> TriggerEvent:
    """An issue with no assignees."""
    return TriggerEvent(number=42, node_id="I_issue42", repository_owner_login="acme")


@pytest.fixture
def assigned_issue() -> TriggerEvent:
    """An issue with one assignee."""
    return TriggerEvent(
        number=43,
        node_id="I_issue43",
        assignees=("octocat",),
        repository_owner_login="acme",
    )
