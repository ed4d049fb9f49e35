"""Token resolver factory."""

from __future__ import annotations

from fieldpilot.auth.base import TokenResolver
from fieldpilot.auth.resolvers.action import ActionTokenResolver
from fieldpilot.contracts.config import ActionInputs


def create_token_resolver(inputs: ActionInputs) -> TokenResolver:
    """Build the resolver for *inputs*; without a token input it reads ``GITHUB_TOKEN``."""
    return ActionTokenResolver(token=inputs.github_token)
