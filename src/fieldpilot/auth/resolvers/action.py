"""Token resolver for action inputs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fieldpilot.auth.base import TokenResolver
from fieldpilot.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionTokenResolver(TokenResolver):
    """Use the ``github-token`` input, or ``env_var`` when the input is absent.

    A supplied but blank input is an error rather than a silent fallback.
    """

    token: str | None = None
    env_var: str = "GITHUB_TOKEN"

    async def resolve(self) -> str:
        if self.token is not None:
            resolved = self.token.strip()
            if not resolved:
                raise AuthenticationError("Input required and not supplied: github-token")
            return resolved

        resolved = (os.getenv(self.env_var) or "").strip()
        if not resolved:
            raise AuthenticationError(f"github-token was not supplied and {self.env_var} is not set or empty")
        _LOG.debug("github-token not supplied; using %s", self.env_var)
        return resolved
