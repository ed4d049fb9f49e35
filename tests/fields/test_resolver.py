"""Tests for project field value resolution."""

from __future__ import annotations

import pytest

from fieldpilot.contracts.exceptions import InvalidFieldValueError, UnsupportedDataTypeError
from fieldpilot.contracts.project import (
    DateValue,
    IterationValue,
    NumberValue,
    ProjectField,
    SingleSelectValue,
    TextValue,
)
from fieldpilot.fields.resolver import find_field, get_update_field_value_key, resolve_field_value

# ---------------------------------------------------------------------------
# get_update_field_value_key
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("data_type", "key"),
    [
        ("TEXT", "text"),
        ("NUMBER", "number"),
        ("DATE", "date"),
        ("ITERATION", "iterationId"),
        ("SINGLE_SELECT", "singleSelectOptionId"),
    ],
)
def test_update_field_value_key_for_supported_types(data_type: str, key: str) -> None:
    assert get_update_field_value_key(data_type) == key


@pytest.mark.parametrize("data_type", ["ASSIGNEES", "LABELS", "MILESTONE", "text", ""])
def test_update_field_value_key_rejects_other_types(data_type: str) -> None:
    with pytest.raises(UnsupportedDataTypeError) as exc_info:
        get_update_field_value_key(data_type)

    assert str(exc_info.value) == (
        f"Unsupported dataType: {data_type}. "
        "Must be one of 'text', 'number', 'date', 'singleSelectOptionId', 'iterationId'"
    )
    assert exc_info.value.data_type == data_type


# ---------------------------------------------------------------------------
# find_field
# ---------------------------------------------------------------------------


def test_find_field_matches_exact_name(text_field: ProjectField, select_field: ProjectField) -> None:
    assert find_field([text_field, select_field], "Priority") is select_field
    assert find_field([text_field, select_field], "priority") is None
    assert find_field([], "Priority") is None


# ---------------------------------------------------------------------------
# Plain fields
# ---------------------------------------------------------------------------


def test_text_value_passes_through(text_field: ProjectField) -> None:
    resolved = resolve_field_value(text_field, "field-text", "field-value")

    assert resolved.field_key == "field-text"
    assert resolved.field_id == "field-text-id"
    assert resolved.value == TextValue(text="field-value")
    assert resolved.value.to_input() == {"text": "field-value"}


def test_date_value_passes_through(date_field: ProjectField) -> None:
    resolved = resolve_field_value(date_field, "Due", "2024-03-01")

    assert resolved.value == DateValue(date="2024-03-01")
    assert resolved.value.to_input() == {"date": "2024-03-01"}


def test_number_value_is_parsed_as_float(number_field: ProjectField) -> None:
    resolved = resolve_field_value(number_field, "Estimate", "42")

    assert resolved.value == NumberValue(number=42.0)
    assert resolved.value.to_input() == {"number": 42.0}
    assert resolved.value.display() == "42"


def test_fractional_number_display(number_field: ProjectField) -> None:
    resolved = resolve_field_value(number_field, "Estimate", "2.5")

    assert resolved.value.to_input() == {"number": 2.5}
    assert resolved.value.display() == "2.5"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("-3", -3.0), (".5", 0.5), ("+2.", 2.0), ("1e3", 1000.0), ("007", 7.0)],
)
def test_decimal_number_forms_are_accepted(number_field: ProjectField, value: str, expected: float) -> None:
    resolved = resolve_field_value(number_field, "Estimate", value)

    assert resolved.value == NumberValue(number=expected)


@pytest.mark.parametrize("value", ["lots", "nan", "inf", "[1]", "1_000", "42pts", " 42", "0x10", "1e999"])
def test_non_numeric_value_is_rejected(number_field: ProjectField, value: str) -> None:
    with pytest.raises(InvalidFieldValueError) as exc_info:
        resolve_field_value(number_field, "Estimate", value)

    assert exc_info.value.field_key == "Estimate"
    assert exc_info.value.value == value


def test_unsupported_type_without_metadata_raises() -> None:
    field = ProjectField(id="f-labels", name="Labels", data_type="LABELS")

    with pytest.raises(UnsupportedDataTypeError):
        resolve_field_value(field, "Labels", "bug")


# ---------------------------------------------------------------------------
# Single select
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("[1]", "o1"),
        ("[0]", "o0"),
        ("low", "o0"),
        ("HIGH", "o1"),
        ("High", "o1"),
    ],
)
def test_single_select_resolves_option(select_field: ProjectField, value: str, expected: str) -> None:
    resolved = resolve_field_value(select_field, "Priority", value)

    assert resolved.value == SingleSelectValue(single_select_option_id=expected)
    assert resolved.value.to_input() == {"singleSelectOptionId": expected}


@pytest.mark.parametrize(
    "value", ["[2]", "[-1]", "[x]", "[]", "[1_0]", "[1abc]", "[ 1]", "[+1]", "Medium", "raw-option-id"]
)
def test_single_select_unresolved_value_is_used_unchanged(select_field: ProjectField, value: str) -> None:
    resolved = resolve_field_value(select_field, "Priority", value)

    assert resolved.value == SingleSelectValue(single_select_option_id=value)


def test_bracketed_option_name_is_not_matched_by_name() -> None:
    field = ProjectField(
        id="f",
        name="Tag",
        data_type="SINGLE_SELECT",
        options=[{"id": "o-bracket", "name": "[wip]"}],
    )

    resolved = resolve_field_value(field, "Tag", "[wip]")

    assert resolved.value.to_input() == {"singleSelectOptionId": "[wip]"}


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("[0]", "it-0"),
        ("[1]", "it-1"),
        ("2024-01-15", "it-1"),
    ],
)
def test_iteration_resolves_by_index_or_start_date(
    iteration_field: ProjectField, value: str, expected: str
) -> None:
    resolved = resolve_field_value(iteration_field, "Sprint", value)

    assert resolved.value == IterationValue(iteration_id=expected)
    assert resolved.value.to_input() == {"iterationId": expected}


@pytest.mark.parametrize("value", ["[5]", "2030-01-01", "it-raw"])
def test_iteration_unresolved_value_is_used_unchanged(iteration_field: ProjectField, value: str) -> None:
    resolved = resolve_field_value(iteration_field, "Sprint", value)

    assert resolved.value == IterationValue(iteration_id=value)


def test_options_take_precedence_over_iterations() -> None:
    field = ProjectField(
        id="f",
        name="Mixed",
        data_type="SINGLE_SELECT",
        options=[{"id": "o0", "name": "2024-01-01"}],
        iterations=[{"id": "it-0", "startDate": "2024-01-01"}],
    )

    resolved = resolve_field_value(field, "Mixed", "[0]")

    assert resolved.value.to_input() == {"singleSelectOptionId": "o0"}


def test_resolved_option_id_feeds_number_parsing() -> None:
    field = ProjectField(id="f", name="Points", data_type="NUMBER", options=[{"id": "8", "name": "Large"}])

    resolved = resolve_field_value(field, "Points", "large")

    assert resolved.value.to_input() == {"number": 8.0}
