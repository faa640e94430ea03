"""CLI entry point for issuestatus.

Runs once per workflow event. Inputs are read from the Actions environment
(INPUT_PROJECT-URL, ...) unless given as options.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from issuestatus import __version__
from issuestatus.actions import load_trigger_event, set_failed, set_output
from issuestatus.config import (
    INPUT_GITHUB_TOKEN,
    INPUT_NEW_STATUS,
    INPUT_OPEN_STATUS,
    INPUT_PROJECT_URL,
    Configuration,
)
from issuestatus.exceptions import IssueStatusError
from issuestatus.logging import get_logger, setup_logging
from issuestatus.projects import GitHubProjectsClient
from issuestatus.updater import StatusUpdater

logger = get_logger("cli")

OUTPUT_FIELD_NAME = "fieldName"


@click.command()
@click.version_option(__version__)
@click.option("--project-url", help="Project board URL (default: INPUT_PROJECT-URL)")
@click.option("--github-token", help="GitHub token (default: INPUT_GITHUB-TOKEN)")
@click.option("--new-status", help="Status to move the item to (default: INPUT_NEW-STATUS)")
@click.option("--open-status", help="Status the item must have (default: INPUT_OPEN-STATUS)")
@click.option(
    "--event",
    "event_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Event payload JSON (default: $GITHUB_EVENT_PATH)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug output")
def main(
    project_url: str | None,
    github_token: str | None,
    new_status: str | None,
    open_status: str | None,
    event_path: Path | None,
    verbose: bool,
) -> None:
    """Move an unassigned issue in the open status to a new status."""
    setup_logging(level="DEBUG" if verbose else None)

    try:
        config = Configuration.from_inputs(
            {
                INPUT_PROJECT_URL: project_url,
                INPUT_GITHUB_TOKEN: github_token,
                INPUT_NEW_STATUS: new_status,
                INPUT_OPEN_STATUS: open_status,
            }
        )
        trigger = load_trigger_event(event_path)

        with GitHubProjectsClient(
            token=config.github_token,
            base_url=config.graphql_url,
            timeout=config.timeout,
        ) as client:
            outcome = StatusUpdater(config, client).run(trigger)

        if outcome.field_name is not None:
            set_output(OUTPUT_FIELD_NAME, outcome.field_name)

    except IssueStatusError as e:
        logger.debug("Run failed", exc_info=True)
        set_failed(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Unexpected error", exc_info=True)
        set_failed(str(e) or type(e).__name__)
        sys.exit(1)
