"""Concrete token resolvers."""

from fieldpilot.auth.resolvers.action import ActionTokenResolver

__all__ = ["ActionTokenResolver"]
