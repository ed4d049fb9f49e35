"""Shared test fixtures for fieldpilot tests."""

from __future__ import annotations

import pytest

from fieldpilot.contracts.project import FieldIteration, FieldOption, ProjectField


@pytest.fixture
def text_field() -> ProjectField:
    return ProjectField(id="field-text-id", name="field-text", data_type="TEXT")


@pytest.fixture
def number_field() -> ProjectField:
    return ProjectField(id="field-number-id", name="Estimate", data_type="NUMBER")


@pytest.fixture
def date_field() -> ProjectField:
    return ProjectField(id="field-date-id", name="Due", data_type="DATE")


@pytest.fixture
def select_field() -> ProjectField:
    return ProjectField(
        id="field-select-id",
        name="Priority",
        data_type="SINGLE_SELECT",
        options=[FieldOption(id="o0", name="Low"), FieldOption(id="o1", name="High")],
    )


@pytest.fixture
def iteration_field() -> ProjectField:
    return ProjectField(
        id="field-iteration-id",
        name="Sprint",
        data_type="ITERATION",
        iterations=[
            FieldIteration(id="it-0", start_date="2024-01-01"),
            FieldIteration(id="it-1", start_date="2024-01-15"),
        ],
    )
