"""GitHub Projects provider."""

from fieldpilot.providers.github.client import GitHubGraphQLClient
from fieldpilot.providers.github.provider import GitHubProjectProvider

__all__ = ["GitHubGraphQLClient", "GitHubProjectProvider"]
