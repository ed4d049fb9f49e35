"""Async GraphQL client for the GitHub API, built on httpx."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from fieldpilot.contracts.config import DEFAULT_GRAPHQL_URL
from fieldpilot.contracts.exceptions import AuthenticationError, GraphQLResponseError, ProviderError

_LOG = logging.getLogger(__name__)


class GitHubGraphQLClient:
    """Thin client that posts GraphQL operations and unwraps ``data``.

    The client owns its ``httpx.AsyncClient`` only when it created it.
    """

    def __init__(
        self,
        *,
        url: str = DEFAULT_GRAPHQL_URL,
        token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._owns_client = http_client is None
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self.http_client = http_client or httpx.AsyncClient(headers=headers, timeout=httpx.Timeout(30.0))

    async def __aenter__(self) -> GitHubGraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def execute(
        self,
        query: str,
        operation_name: str | None = None,
        variables: dict[str, Any] | None = None,
    ) -> httpx.Response:
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        if operation_name:
            payload["operationName"] = operation_name
        _LOG.debug("GraphQL %s", operation_name or "operation")
        try:
            return await self.http_client.post(self.url, json=payload)
        except httpx.HTTPError as exc:
            raise ProviderError(f"GitHub request failed: {exc}") from exc

    def get_data(self, response: httpx.Response) -> dict[str, Any]:
        if response.status_code in (401, 403):
            raise AuthenticationError(f"GitHub rejected the credentials (HTTP {response.status_code})")
        if not response.is_success:
            raise ProviderError(f"GitHub returned HTTP {response.status_code}: {response.text}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("GitHub returned a non-JSON response") from exc
        if not isinstance(payload, dict):
            raise ProviderError("GitHub returned an invalid GraphQL payload")

        errors = payload.get("errors")
        if errors:
            raise GraphQLResponseError(errors)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise ProviderError("GraphQL response missing data payload")
        return data

    async def query(
        self,
        query: str,
        *,
        operation_name: str | None = None,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        response = await self.execute(query, operation_name=operation_name, variables=variables)
        return self.get_data(response)
