"""Field map building and value resolution."""

from fieldpilot.fields.field_map import build_field_map
from fieldpilot.fields.resolver import (
    SUPPORTED_VALUE_KEYS,
    find_field,
    get_update_field_value_key,
    resolve_field_value,
)

__all__ = [
    "SUPPORTED_VALUE_KEYS",
    "build_field_map",
    "find_field",
    "get_update_field_value_key",
    "resolve_field_value",
]
