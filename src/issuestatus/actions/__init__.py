"""GitHub Actions runtime - inputs, event payload, outputs and failure reporting."""

from issuestatus.actions.commands import escape_data, get_input, set_failed, set_output
from issuestatus.actions.context import load_trigger_event
from issuestatus.actions.models import EventPayload, TriggerEvent

__all__ = [
    "EventPayload",
    "TriggerEvent",
    "escape_data",
    "get_input",
    "load_trigger_event",
    "set_failed",
    "set_output",
]
