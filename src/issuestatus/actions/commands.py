"""Actions runtime commands: inputs, outputs and the failure channel."""

from __future__ import annotations

import logging
import os
import sys
import uuid

from issuestatus.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


def escape_data(text: str) -> str:
    """Escape a message for use in a workflow command."""
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _input_env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, required: bool = False) -> str:
    """Read an action input from the environment.

    Args:
        name: Input name as declared in action.yml (e.g. 'project-url').
        required: Raise if the input is missing or blank.

    Returns:
        The input value with surrounding whitespace removed, or '' if unset.

    Raises:
        InvalidConfigurationError: If a required input is not supplied.
    """
    value = os.environ.get(_input_env_name(name), "").strip()
    if required and not value:
        raise InvalidConfigurationError(f"Input required and not supplied: {name}")
    return value


def set_output(name: str, value: str) -> None:
    """Publish a step output.

    Appends to the $GITHUB_OUTPUT file using the delimiter form, so values
    containing newlines are preserved.

    Args:
        name: Output name.
        value: Output value.
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        logger.info("Output %s=%s (GITHUB_OUTPUT not set)", name, value)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    logger.debug("Set output %s", name)


def set_failed(message: str) -> None:
    """Report the step as failed with an error annotation."""
    sys.stdout.write(f"::error::{escape_data(message)}\n")
    sys.stdout.flush()
