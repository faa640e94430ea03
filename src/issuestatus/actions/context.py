"""Load the triggering issue or pull request from the event payload."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from issuestatus.actions.models import EventPayload, TriggerEvent
from issuestatus.exceptions import InvalidConfigurationError


def trigger_event_from_payload(payload: dict[str, Any]) -> TriggerEvent:
    """Build a TriggerEvent from a decoded event payload.

    The issue takes precedence over the pull request when both are present,
    which happens for ``issue_comment`` events on pull requests.

    Args:
        payload: Decoded webhook payload.

    Returns:
        TriggerEvent for the issue or pull request.

    Raises:
        InvalidConfigurationError: If the payload has no issue or pull request,
            or the item is malformed.
    """
    try:
        event = EventPayload.model_validate(payload)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid event payload: {e}") from e

    item = event.issue or event.pull_request
    if item is None:
        raise InvalidConfigurationError(
            "Event payload has no issue or pull_request; "
            "run this action on issues or pull_request events"
        )

    owner_login = event.repository.owner.login if event.repository else None
    return TriggerEvent(
        number=item.number,
        node_id=item.node_id,
        assignees=tuple(a.login for a in item.assignees),
        repository_owner_login=owner_login,
    )


def load_trigger_event(path: str | Path | None = None) -> TriggerEvent:
    """Load the triggering item from an event payload file.

    Args:
        path: Path to the JSON payload. Defaults to $GITHUB_EVENT_PATH.

    Returns:
        TriggerEvent for the issue or pull request.

    Raises:
        InvalidConfigurationError: If the file is missing, unreadable, or not a
            usable payload.
    """
    if path is None:
        path = os.environ.get("GITHUB_EVENT_PATH")
        if not path:
            raise InvalidConfigurationError("GITHUB_EVENT_PATH is not set")

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidConfigurationError(f"Cannot read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError(f"Event payload {path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidConfigurationError(f"Event payload {path} is not a JSON object")

    return trigger_event_from_payload(payload)
