"""GitHub Projects (v2) provider adapter."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from pydantic import ValidationError

from fieldpilot.contracts.exceptions import ProviderError
from fieldpilot.contracts.project import ProjectField, ProjectReference, ResolvedFieldValue
from fieldpilot.contracts.provider import ProjectProvider
from fieldpilot.providers.github.client import GitHubGraphQLClient
from fieldpilot.providers.github.queries import (
    GET_PROJECT_FIELDS,
    UPDATE_PROJECT_FIELD_VALUE,
    get_project_query,
)

_LOG = logging.getLogger(__name__)


class GitHubProjectProvider(ProjectProvider):
    """Issues the project lookup, schema fetch and field update calls."""

    def __init__(
        self,
        *,
        token: str,
        graphql_url: str,
        client: GitHubGraphQLClient | None = None,
    ) -> None:
        self._token = token
        self._graphql_url = graphql_url
        self._client = client

    async def __aenter__(self) -> GitHubProjectProvider:
        if self._client is None:
            self._client = GitHubGraphQLClient(url=self._graphql_url, token=self._token)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def resolve_project_id(self, project: ProjectReference) -> str:
        data = await self._graphql(
            get_project_query(project.owner_type),
            "getProject",
            {"projectOwnerName": project.owner_name, "projectNumber": project.project_number},
        )
        owner = self._require_dict(data, project.owner_type)
        project_node = self._require_dict(owner, "projectV2")
        project_id = self._require_str(project_node, "id")
        _LOG.debug("Resolved project %s/%d to %s", project.owner_name, project.project_number, project_id)
        return project_id

    async def fetch_fields(self, project_id: str) -> list[ProjectField]:
        data = await self._graphql(GET_PROJECT_FIELDS, "getProjectFields", {"projectId": project_id})
        fields_payload = self._require_dict(self._require_dict(data, "node"), "fields")
        fields: list[ProjectField] = []
        for node in self._require_list(fields_payload, "nodes"):
            # Nodes matched by no fragment come back empty.
            if not isinstance(node, dict) or not node.get("name"):
                continue
            try:
                fields.append(ProjectField.from_node(node))
            except ValidationError as exc:
                raise ProviderError(f"Invalid field definition for '{node.get('name')}': {exc}") from exc
        _LOG.debug("Fetched %d field(s) for project %s", len(fields), project_id)
        return fields

    async def update_field_value(self, *, project_id: str, item_id: str, resolved: ResolvedFieldValue) -> str:
        data = await self._graphql(
            UPDATE_PROJECT_FIELD_VALUE,
            "updateProjectV2ItemFieldValue",
            {
                "input": {
                    "projectId": project_id,
                    "itemId": item_id,
                    "fieldId": resolved.field_id,
                    "value": resolved.value.to_input(),
                }
            },
        )
        payload = self._require_dict(data, "updateProjectV2ItemFieldValue")
        return self._require_str(self._require_dict(payload, "projectV2Item"), "id")

    async def _graphql(self, query: str, operation_name: str, variables: dict[str, Any]) -> dict[str, Any]:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")
        return await self._client.query(query, operation_name=operation_name, variables=variables)

    @staticmethod
    def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise ProviderError(f"Missing/invalid object at key '{key}'")
        return value

    @staticmethod
    def _require_list(data: dict[str, Any], key: str) -> list[Any]:
        value = data.get(key)
        if not isinstance(value, list):
            raise ProviderError(f"Missing/invalid list at key '{key}'")
        return value

    @staticmethod
    def _require_str(data: dict[str, Any], key: str) -> str:
        value = data.get(key)
        if not isinstance(value, str):
            raise ProviderError(f"Missing/invalid string at key '{key}'")
        return value
