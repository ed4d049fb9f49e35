"""Exception hierarchy for fieldpilot."""

from __future__ import annotations

import json
from typing import Any


class FieldPilotError(Exception):
    """Base exception for all fieldpilot errors."""


class ConfigError(FieldPilotError):
    """Action inputs are missing or invalid."""


class ProjectURLError(ConfigError):
    """Project URL does not match the supported shape."""

    def __init__(self, url: str) -> None:
        super().__init__(
            f"Invalid project URL: {url}. Project URL should match the format "
            "https://github.com/<orgs-or-users>/<ownerName>/projects/<projectNumber>"
        )
        self.url = url


class UnsupportedOwnerTypeError(ConfigError):
    """Owner segment of a project URL is neither ``orgs`` nor ``users``."""

    def __init__(self, owner_type: str | None) -> None:
        super().__init__(f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'")
        self.owner_type = owner_type


class UnsupportedDataTypeError(FieldPilotError):
    """Project field has a data type that cannot be updated."""

    def __init__(self, data_type: str, supported: tuple[str, ...]) -> None:
        expected = ", ".join(f"'{key}'" for key in supported)
        super().__init__(f"Unsupported dataType: {data_type}. Must be one of {expected}")
        self.data_type = data_type


class InvalidFieldValueError(FieldPilotError):
    """A requested value cannot be encoded for the field's data type."""

    def __init__(self, message: str, *, field_key: str, value: str) -> None:
        super().__init__(message)
        self.field_key = field_key
        self.value = value


class ProviderError(FieldPilotError):
    """Remote call to the project provider failed."""

    def details(self) -> str:
        """Serialized error detail used in per-field failure lines."""
        return json.dumps({"name": type(self).__name__, "message": str(self)}, indent=2)


class GraphQLResponseError(ProviderError):
    """GraphQL endpoint answered with an ``errors`` payload."""

    def __init__(self, errors: list[Any]) -> None:
        messages = [str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors]
        super().__init__(f"GraphQL returned errors: {'; '.join(messages) or 'unknown error'}")
        self.errors = errors

    def details(self) -> str:
        return json.dumps({"name": type(self).__name__, "errors": self.errors}, indent=2)


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""
