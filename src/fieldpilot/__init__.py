"""Public API surface for fieldpilot."""

from fieldpilot.auth import create_token_resolver
from fieldpilot.config import load_inputs
from fieldpilot.contracts.config import ActionInputs
from fieldpilot.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    FieldPilotError,
    GraphQLResponseError,
    InvalidFieldValueError,
    ProjectURLError,
    ProviderError,
    UnsupportedDataTypeError,
    UnsupportedOwnerTypeError,
)
from fieldpilot.contracts.project import FieldValue, ProjectField, ProjectReference, ResolvedFieldValue
from fieldpilot.contracts.provider import ProjectProvider
from fieldpilot.contracts.report import FieldUpdateOutcome, OutcomeStatus, UpdateReport
from fieldpilot.fields import build_field_map, get_update_field_value_key, resolve_field_value
from fieldpilot.providers import create_provider
from fieldpilot.targets import must_get_owner_type_query, parse_project_url
from fieldpilot.updater import FieldUpdater, update_project

__all__ = [
    "ActionInputs",
    "AuthenticationError",
    "ConfigError",
    "FieldPilotError",
    "FieldUpdateOutcome",
    "FieldUpdater",
    "FieldValue",
    "GraphQLResponseError",
    "InvalidFieldValueError",
    "OutcomeStatus",
    "ProjectField",
    "ProjectProvider",
    "ProjectReference",
    "ProjectURLError",
    "ProviderError",
    "ResolvedFieldValue",
    "UnsupportedDataTypeError",
    "UnsupportedOwnerTypeError",
    "UpdateReport",
    "build_field_map",
    "create_provider",
    "create_token_resolver",
    "get_update_field_value_key",
    "load_inputs",
    "must_get_owner_type_query",
    "parse_project_url",
    "resolve_field_value",
    "update_project",
]
