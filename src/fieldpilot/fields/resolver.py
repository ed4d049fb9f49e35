"""Resolution of raw input values into typed project field values."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from fieldpilot.contracts.exceptions import InvalidFieldValueError, UnsupportedDataTypeError
from fieldpilot.contracts.project import (
    DateValue,
    FieldValue,
    IterationValue,
    NumberValue,
    ProjectField,
    ResolvedFieldValue,
    SingleSelectValue,
    TextValue,
)

_T = TypeVar("_T")

_INDEX_RE = re.compile(r"-?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_UPDATE_FIELD_VALUE_KEYS: dict[str, str] = {
    "TEXT": "text",
    "NUMBER": "number",
    "DATE": "date",
    "ITERATION": "iterationId",
    "SINGLE_SELECT": "singleSelectOptionId",
}

SUPPORTED_VALUE_KEYS: tuple[str, ...] = ("text", "number", "date", "singleSelectOptionId", "iterationId")


def get_update_field_value_key(data_type: str) -> str:
    """Return the mutation value key for a project field data type.

    Raises:
        UnsupportedDataTypeError: For any data type other than TEXT, NUMBER,
            DATE, ITERATION or SINGLE_SELECT.
    """
    key = _UPDATE_FIELD_VALUE_KEYS.get(data_type)
    if key is None:
        raise UnsupportedDataTypeError(data_type, SUPPORTED_VALUE_KEYS)
    return key


def find_field(fields: Sequence[ProjectField], key: str) -> ProjectField | None:
    """Find a field by exact name."""
    for field in fields:
        if field.name == key:
            return field
    return None


def parse_index_reference(value: str) -> int | None:
    """Parse ``[<integer>]`` into an index.

    Returns None when *value* is bracketed but the content is not a plain
    decimal integer. Callers check the brackets first via :func:`is_index_reference`.
    """
    inner = value[1:-1]
    if _INDEX_RE.fullmatch(inner) is None:
        return None
    return int(inner)


def is_index_reference(value: str) -> bool:
    return len(value) >= 2 and value.startswith("[") and value.endswith("]")


def select_entry(entries: Sequence[_T], value: str, label: Callable[[_T], str]) -> _T | None:
    """Pick an entry by ``[index]`` reference or case-insensitive label match.

    Negative or out-of-range indexes select nothing.
    """
    if is_index_reference(value):
        index = parse_index_reference(value)
        if index is None or not 0 <= index < len(entries):
            return None
        return entries[index]

    lower = value.lower()
    for entry in entries:
        if label(entry).lower() == lower:
            return entry
    return None


def resolve_reference(field: ProjectField, raw_value: str) -> str:
    """Translate an option or iteration reference into its id.

    Unresolved values are returned unchanged so ids can be passed directly.
    """
    if field.options is not None:
        option = select_entry(field.options, raw_value, lambda o: o.name)
        return option.id if option is not None else raw_value
    if field.iterations is not None:
        iteration = select_entry(field.iterations, raw_value, lambda i: i.start_date)
        return iteration.id if iteration is not None else raw_value
    return raw_value


def _parse_number(field_key: str, value: str) -> float:
    number = float(value) if _NUMBER_RE.fullmatch(value) else math.nan
    # Exponents can still overflow to infinity.
    if not math.isfinite(number):
        raise InvalidFieldValueError(
            f"Value '{value}' for field '{field_key}' is not a finite number",
            field_key=field_key,
            value=value,
        )
    return number


def build_field_value(field_key: str, data_type: str, value: str) -> FieldValue:
    value_key = get_update_field_value_key(data_type)
    if value_key == "number":
        return NumberValue(number=_parse_number(field_key, value))
    if value_key == "date":
        return DateValue(date=value)
    if value_key == "singleSelectOptionId":
        return SingleSelectValue(single_select_option_id=value)
    if value_key == "iterationId":
        return IterationValue(iteration_id=value)
    return TextValue(text=value)


def resolve_field_value(field: ProjectField, field_key: str, raw_value: str) -> ResolvedFieldValue:
    """Resolve *raw_value* into the typed payload for *field*.

    Raises:
        UnsupportedDataTypeError: If the field's data type cannot be updated.
        InvalidFieldValueError: If a NUMBER field receives a non-numeric value.
    """
    value = resolve_reference(field, raw_value)
    return ResolvedFieldValue(
        field_key=field_key,
        field_id=field.id,
        value=build_field_value(field_key, field.data_type, value),
    )
