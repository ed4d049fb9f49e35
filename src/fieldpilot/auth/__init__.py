"""Auth module public exports."""

from fieldpilot.auth.base import TokenResolver
from fieldpilot.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
