"""StatusUpdater - move an unassigned, open issue to a new Status."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from issuestatus.exceptions import RemoteMutationError
from issuestatus.projects import parse_project_url
from issuestatus.updater.models import UpdateOutcome, UpdateStatus

if TYPE_CHECKING:
    from issuestatus.actions import TriggerEvent
    from issuestatus.config import Configuration
    from issuestatus.projects import ProjectsClient

logger = logging.getLogger(__name__)


class StatusUpdater:
    """Runs the status update for one triggering issue or pull request.

    The workflow is strictly sequential:
    parse URL -> assignee gate -> project ID -> item Status -> open gate -> mutation.
    Items that already have an assignee are left alone.
    """

    def __init__(self, config: Configuration, client: ProjectsClient) -> None:
        """Initialize the updater.

        Args:
            config: Inputs for this run.
            client: Client used for the project queries and the mutation.
        """
        self.config = config
        self.client = client

    def run(self, trigger: TriggerEvent) -> UpdateOutcome:
        """Update the Status of the triggering item if it is eligible.

        Args:
            trigger: The issue or pull request that fired the workflow.

        Returns:
            UpdateOutcome describing whether the item was updated or skipped.

        Raises:
            InvalidConfigurationError: If the project URL is malformed.
            UnsupportedOwnerTypeError: If the URL owner type is unknown.
            RemoteQueryError: If a project query fails.
            MissingProjectItemError: If the item is not in the project.
            RemoteMutationError: If the update fails or new-status is not an option.
        """
        project = parse_project_url(self.config.project_url)

        logger.debug("Issue/PR owner: %s", trigger.repository_owner_login)
        logger.debug("Issue assignees: %s", list(trigger.assignees))
        logger.debug("Project URL: %s", self.config.project_url)
        logger.debug("Project owner: %s", project.owner_name)
        logger.debug("Project number: %d", project.project_number)
        logger.debug("Project owner type: %s", project.owner_type.value)

        if trigger.is_assigned:
            reason = f"Skipping issue {trigger.number} because it is already assigned an owner"
            logger.info(reason)
            return UpdateOutcome(
                status=UpdateStatus.SKIPPED_ASSIGNED,
                item_number=trigger.number,
                reason=reason,
            )

        project_id = self.client.get_project_id(project)
        state = self.client.get_status_field(trigger.node_id, project_id)

        logger.debug("Content ID: %s", trigger.node_id)
        logger.debug("Item ID: %s", state.item_id)

        if state.status_name != self.config.open_status:
            reason = (
                f"Skipping issue {trigger.number} because it is not in an open status "
                f"(status: {state.status_name}, open status: {self.config.open_status})"
            )
            logger.info(reason)
            return UpdateOutcome(
                status=UpdateStatus.SKIPPED_NOT_OPEN,
                item_number=trigger.number,
                reason=reason,
            )

        option_id = state.options.get(self.config.new_status)
        if option_id is None:
            raise RemoteMutationError(
                f"Status '{self.config.new_status}' is not an option of the Status field. "
                f"Available: {list(state.options)}"
            )

        field_name = self.client.set_status(
            project_id=project_id,
            item_id=state.item_id,
            field_id=state.field_id,
            option_id=option_id,
        )
        reason = f"Moved issue {trigger.number} from {state.status_name} to {field_name}"
        logger.info(reason)
        return UpdateOutcome(
            status=UpdateStatus.UPDATED,
            item_number=trigger.number,
            field_name=field_name,
            reason=reason,
        )
