"""Parse project board URLs."""

from __future__ import annotations

import re

from issuestatus.exceptions import InvalidConfigurationError, UnsupportedOwnerTypeError
from issuestatus.projects.models import OwnerType, ProjectReference

# https://github.com/orgs|users/<ownerName>/projects/<projectNumber>
PROJECT_URL_PATTERN = re.compile(
    r"^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)"
    r"/projects/(?P<project_number>\d+)"
)

EXPECTED_FORMAT = "https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>"

OWNER_TYPES = {
    "orgs": OwnerType.ORGANIZATION,
    "users": OwnerType.USER,
}


def owner_type_from_token(token: str | None) -> OwnerType:
    """Map the owner segment of a project URL to an OwnerType.

    Raises:
        UnsupportedOwnerTypeError: If the token is not 'orgs' or 'users'.
    """
    owner_type = OWNER_TYPES.get(token) if token is not None else None
    if owner_type is None:
        raise UnsupportedOwnerTypeError(
            f"Unsupported ownerType: {token}. Must be one of 'orgs' or 'users'"
        )
    return owner_type


def parse_project_url(url: str) -> ProjectReference:
    """Parse a project board URL.

    Args:
        url: URL such as https://github.com/orgs/acme/projects/7. The scheme
             is optional.

    Returns:
        ProjectReference for the board.

    Raises:
        InvalidConfigurationError: If the URL does not match the expected format.
        UnsupportedOwnerTypeError: If the owner segment is not recognized.
    """
    match = PROJECT_URL_PATTERN.match(url.strip())
    if not match:
        raise InvalidConfigurationError(
            f"Invalid project URL: {url}. Project URL should match the format {EXPECTED_FORMAT}"
        )

    project_number = int(match.group("project_number"))
    if project_number <= 0:
        raise InvalidConfigurationError(
            f"Invalid project URL: {url}. Project number must be positive"
        )

    return ProjectReference(
        owner_type=owner_type_from_token(match.group("owner_type")),
        owner_name=match.group("owner_name"),
        project_number=project_number,
    )
