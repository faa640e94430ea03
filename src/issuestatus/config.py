"""Configuration loading for a status update run."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Any

from issuestatus.actions import get_input
from issuestatus.exceptions import InvalidConfigurationError

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_TIMEOUT = 30.0

# Action input names, as declared in action.yml
INPUT_PROJECT_URL = "project-url"
INPUT_GITHUB_TOKEN = "github-token"
INPUT_NEW_STATUS = "new-status"
INPUT_OPEN_STATUS = "open-status"


@dataclass(frozen=True)
class Configuration:
    """Inputs for one run.

    Attributes:
        project_url: URL of the target project board.
        github_token: Token with read/write access to the project.
        new_status: Status option to move the item to.
        open_status: Status the item must currently have to be moved.
        graphql_url: GraphQL endpoint (GitHub Enterprise uses its own).
        timeout: Per-request timeout in seconds.
    """

    project_url: str
    github_token: str = field(repr=False)
    new_status: str
    open_status: str
    graphql_url: str = DEFAULT_GRAPHQL_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        required = {
            INPUT_PROJECT_URL: self.project_url,
            INPUT_GITHUB_TOKEN: self.github_token,
            INPUT_NEW_STATUS: self.new_status,
            INPUT_OPEN_STATUS: self.open_status,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise InvalidConfigurationError(f"Missing required inputs: {', '.join(missing)}")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise InvalidConfigurationError(
                f"Timeout must be a positive number, got {self.timeout}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Configuration:
        """Create configuration from a dictionary keyed by input name.

        Args:
            data: Mapping such as {'project-url': ..., 'github-token': ...}.
                  Optional keys 'graphql-url' and 'timeout' are honoured.

        Returns:
            Parsed configuration.

        Raises:
            InvalidConfigurationError: If required values are missing or the
                timeout is not a positive number.
        """
        try:
            timeout = float(data.get("timeout") or DEFAULT_TIMEOUT)
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationError(f"Invalid timeout: {data.get('timeout')!r}") from e

        return cls(
            project_url=str(data.get(INPUT_PROJECT_URL) or "").strip(),
            github_token=str(data.get(INPUT_GITHUB_TOKEN) or "").strip(),
            new_status=str(data.get(INPUT_NEW_STATUS) or "").strip(),
            open_status=str(data.get(INPUT_OPEN_STATUS) or "").strip(),
            graphql_url=str(data.get("graphql-url") or DEFAULT_GRAPHQL_URL),
            timeout=timeout,
        )

    @classmethod
    def from_inputs(cls, overrides: dict[str, Any] | None = None) -> Configuration:
        """Read configuration from the Actions inputs and environment.

        Args:
            overrides: Values keyed by input name that take precedence over
                       the environment (e.g. from command line options).
                       None values are ignored.

        Raises:
            InvalidConfigurationError: If a required input is not supplied.
        """
        data: dict[str, Any] = {
            name: get_input(name)
            for name in (INPUT_PROJECT_URL, INPUT_GITHUB_TOKEN, INPUT_NEW_STATUS, INPUT_OPEN_STATUS)
        }
        data["graphql-url"] = os.environ.get("GITHUB_GRAPHQL_URL")
        data["timeout"] = os.environ.get("ISSUESTATUS_TIMEOUT")
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})
        return cls.from_dict(data)
