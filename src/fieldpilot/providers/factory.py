"""Provider factory."""

from __future__ import annotations

from fieldpilot.contracts.config import ActionInputs
from fieldpilot.contracts.provider import ProjectProvider
from fieldpilot.providers.github.provider import GitHubProjectProvider


def create_provider(inputs: ActionInputs, *, token: str) -> ProjectProvider:
    return GitHubProjectProvider(token=token, graphql_url=inputs.graphql_url)
