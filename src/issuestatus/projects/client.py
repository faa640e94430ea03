"""GitHubProjectsClient - GraphQL calls against GitHub Projects (ProjectsV2)."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from issuestatus.config import DEFAULT_GRAPHQL_URL, DEFAULT_TIMEOUT
from issuestatus.exceptions import (
    IssueStatusError,
    MissingProjectItemError,
    RemoteMutationError,
    RemoteQueryError,
)
from issuestatus.logging import sanitize_for_log, truncate_output
from issuestatus.projects.models import ProjectReference, StatusFieldState

logger = logging.getLogger("issuestatus.projects")

STATUS_FIELD_NAME = "Status"

PROJECT_ID_QUERY = """
query getProject($projectOwnerName: String!, $projectNumber: Int!) {
    %(owner_field)s(login: $projectOwnerName) {
        projectV2(number: $projectNumber) {
            id
        }
    }
}
"""

ITEM_STATUS_QUERY = """
query issueStatus($nodeId: ID!) {
    node(id: $nodeId) {
        ... on Issue {
            projectItems(first: 20, includeArchived: false) {
                ...itemStatus
            }
        }
        ... on PullRequest {
            projectItems(first: 20, includeArchived: false) {
                ...itemStatus
            }
        }
    }
}

fragment itemStatus on ProjectV2ItemConnection {
    nodes {
        id
        project {
            id
        }
        fieldValueByName(name: "Status") {
            ... on ProjectV2ItemFieldSingleSelectValue {
                name
                field {
                    ... on ProjectV2SingleSelectField {
                        id
                        options {
                            id
                            name
                        }
                    }
                }
            }
        }
    }
}
"""

UPDATE_STATUS_MUTATION = """
mutation updateIssueStatus($projectId: ID!, $itemId: ID!, $fieldId: ID!, $optionId: String!) {
    updateProjectV2ItemFieldValue(
        input: {
            projectId: $projectId
            itemId: $itemId
            fieldId: $fieldId
            value: { singleSelectOptionId: $optionId }
        }
    ) {
        projectV2Item {
            id
            fieldValueByName(name: "Status") {
                ... on ProjectV2ItemFieldSingleSelectValue {
                    name
                }
            }
        }
    }
}
"""


class ProjectsClient(Protocol):
    """The three remote operations the status update needs."""

    def get_project_id(self, project: ProjectReference) -> str: ...

    def get_status_field(self, node_id: str, project_id: str) -> StatusFieldState: ...

    def set_status(self, project_id: str, item_id: str, field_id: str, option_id: str) -> str: ...


class GitHubProjectsClient:
    """Client for GitHub Projects (ProjectsV2) over the GraphQL API.

    Nothing is cached between calls; every identifier is fetched fresh.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub token with project scope
            base_url: GitHub GraphQL API URL (for testing/enterprise)
            timeout: Per-request timeout in seconds
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> GitHubProjectsClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _graphql(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        error_cls: type[IssueStatusError] = RemoteQueryError,
    ) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables
            error_cls: Exception raised on failure

        Returns:
            Response data

        Raises:
            error_cls: If the request fails, times out, or returns errors
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self.client.post(self.base_url, json=payload)
        except httpx.TimeoutException as e:
            raise error_cls(f"GraphQL request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise error_cls(f"GraphQL request failed: {sanitize_for_log(str(e))}") from e

        if response.status_code != 200:
            body = sanitize_for_log(truncate_output(response.text))
            raise error_cls(f"GraphQL request failed: {response.status_code} - {body}")

        try:
            data = response.json()
        except ValueError as e:
            raise error_cls("GraphQL response is not valid JSON") from e

        if not isinstance(data, dict):
            raise error_cls(f"GraphQL response is not an object: {type(data).__name__}")

        if data.get("errors"):
            raise error_cls(f"GraphQL errors: {sanitize_for_log(str(data['errors']))}")

        result = data.get("data") or {}
        if not isinstance(result, dict):
            raise error_cls(f"GraphQL data is not an object: {type(result).__name__}")
        return result

    def get_project_id(self, project: ProjectReference) -> str:
        """Resolve the node ID of a project board.

        Args:
            project: Parsed project URL

        Returns:
            Project node ID

        Raises:
            RemoteQueryError: If the query fails or the project is not found
        """
        owner_field = project.owner_type.query_field
        context = (
            f"{project.owner_type.value} {project.owner_name}, "
            f"project #{project.project_number}"
        )

        try:
            data = self._graphql(
                PROJECT_ID_QUERY % {"owner_field": owner_field},
                {
                    "projectOwnerName": project.owner_name,
                    "projectNumber": project.project_number,
                },
            )
        except RemoteQueryError as e:
            raise RemoteQueryError(f"Could not resolve project ({context}): {e}") from e

        owner = data.get(owner_field) or {}
        project_id = (owner.get("projectV2") or {}).get("id")
        if not project_id:
            raise RemoteQueryError(f"Project not found ({context})")

        logger.debug("Project node ID: %s", project_id)
        return str(project_id)

    def get_status_field(self, node_id: str, project_id: str) -> StatusFieldState:
        """Get the Status value of an issue or pull request within a project.

        The first project item of the issue that belongs to the given project
        is used.

        Args:
            node_id: Node ID of the issue or pull request
            project_id: Node ID of the project

        Returns:
            StatusFieldState for the item

        Raises:
            RemoteQueryError: If the query fails
            MissingProjectItemError: If the issue has no item, or no Status
                value, in the project
        """
        data = self._graphql(ITEM_STATUS_QUERY, {"nodeId": node_id})

        node = data.get("node") or {}
        items = (node.get("projectItems") or {}).get("nodes") or []
        item = next(
            (i for i in items if i and (i.get("project") or {}).get("id") == project_id),
            None,
        )
        if item is None:
            raise MissingProjectItemError(f"Item {node_id} is not in project {project_id}")

        value = item.get("fieldValueByName") or {}
        field = value.get("field") or {}
        if not value.get("name") or not field.get("id"):
            raise MissingProjectItemError(
                f"Item {node_id} has no {STATUS_FIELD_NAME} value in project {project_id}"
            )

        options = {
            opt["name"]: opt["id"]
            for opt in field.get("options") or []
            if opt and opt.get("name") and opt.get("id")
        }
        state = StatusFieldState(
            status_name=value["name"],
            field_id=str(field["id"]),
            item_id=str(item["id"]),
            options=options,
        )
        logger.debug("Issue status: %s", state.status_name)
        logger.debug("Field ID: %s", state.field_id)
        return state

    def set_status(self, project_id: str, item_id: str, field_id: str, option_id: str) -> str:
        """Set the Status of a project item.

        Args:
            project_id: Node ID of the project
            item_id: Node ID of the project item
            field_id: Node ID of the Status field
            option_id: ID of the Status option to select

        Returns:
            Status name reported by GitHub after the update

        Raises:
            RemoteMutationError: If the mutation fails
        """
        data = self._graphql(
            UPDATE_STATUS_MUTATION,
            {
                "projectId": project_id,
                "itemId": item_id,
                "fieldId": field_id,
                "optionId": option_id,
            },
            error_cls=RemoteMutationError,
        )

        item = (data.get("updateProjectV2ItemFieldValue") or {}).get("projectV2Item") or {}
        field_name = (item.get("fieldValueByName") or {}).get("name")
        if not field_name:
            raise RemoteMutationError(f"Update of item {item_id} returned no {STATUS_FIELD_NAME}")

        logger.info("Set %s of item %s to %s", STATUS_FIELD_NAME, item_id, field_name)
        return str(field_name)
