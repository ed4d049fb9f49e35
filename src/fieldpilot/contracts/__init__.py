"""Public contracts for fieldpilot."""

from fieldpilot.contracts.config import DEFAULT_GRAPHQL_URL, ActionInputs
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
from fieldpilot.contracts.project import (
    DateValue,
    FieldIteration,
    FieldOption,
    FieldValue,
    IterationValue,
    NumberValue,
    ProjectField,
    ProjectReference,
    ResolvedFieldValue,
    SingleSelectValue,
    TextValue,
)
from fieldpilot.contracts.provider import ProjectProvider
from fieldpilot.contracts.report import FieldUpdateOutcome, OutcomeStatus, UpdateReport

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "ActionInputs",
    "AuthenticationError",
    "ConfigError",
    "DateValue",
    "FieldIteration",
    "FieldOption",
    "FieldPilotError",
    "FieldUpdateOutcome",
    "FieldValue",
    "GraphQLResponseError",
    "InvalidFieldValueError",
    "IterationValue",
    "NumberValue",
    "OutcomeStatus",
    "ProjectField",
    "ProjectProvider",
    "ProjectReference",
    "ProjectURLError",
    "ProviderError",
    "ResolvedFieldValue",
    "SingleSelectValue",
    "TextValue",
    "UnsupportedDataTypeError",
    "UnsupportedOwnerTypeError",
    "UpdateReport",
]
