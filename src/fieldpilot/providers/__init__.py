"""Project provider implementations."""

from fieldpilot.providers.factory import create_provider

__all__ = ["create_provider"]
