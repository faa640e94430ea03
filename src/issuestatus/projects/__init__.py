"""GitHub Projects - project URL parsing and Status field queries."""

from issuestatus.projects.client import GitHubProjectsClient, ProjectsClient
from issuestatus.projects.models import OwnerType, ProjectReference, StatusFieldState
from issuestatus.projects.url import owner_type_from_token, parse_project_url

__all__ = [
    "GitHubProjectsClient",
    "OwnerType",
    "ProjectReference",
    "ProjectsClient",
    "StatusFieldState",
    "owner_type_from_token",
    "parse_project_url",
]
