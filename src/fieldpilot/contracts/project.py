"""Project, field schema and field value models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

OwnerTypeQuery = Literal["organization", "user"]


class ProjectReference(BaseModel):
    """Owner and number of a GitHub project, parsed from its URL."""

    owner_type: OwnerTypeQuery
    owner_name: str
    project_number: int = Field(gt=0)

    model_config = {"frozen": True}


# ------------------------------------------------------------------
# Field schema (what the project *has*)
# ------------------------------------------------------------------


class FieldOption(BaseModel):
    id: str
    name: str

    model_config = {"frozen": True}


class FieldIteration(BaseModel):
    id: str
    start_date: str = Field(alias="startDate")
    title: str | None = None
    duration: int | None = None

    model_config = {"frozen": True, "populate_by_name": True}


class ProjectField(BaseModel):
    """A project field definition as returned by the schema lookup.

    ``options`` is set for single-select fields and ``iterations`` for
    iteration fields; plain fields carry neither.
    """

    id: str
    name: str
    data_type: str = Field(alias="dataType")
    options: list[FieldOption] | None = None
    iterations: list[FieldIteration] | None = None

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_node(cls, node: dict[str, Any]) -> ProjectField:
        configuration = node.get("configuration") or {}
        return cls.model_validate(
            {
                "id": node.get("id"),
                "name": node.get("name"),
                "dataType": node.get("dataType"),
                "options": node.get("options"),
                "iterations": configuration.get("iterations"),
            }
        )


# ------------------------------------------------------------------
# Field values (what the mutation *sets*)
# ------------------------------------------------------------------


class TextValue(BaseModel):
    kind: Literal["TEXT"] = "TEXT"
    text: str

    def to_input(self) -> dict[str, Any]:
        return {"text": self.text}

    def display(self) -> str:
        return self.text


class NumberValue(BaseModel):
    kind: Literal["NUMBER"] = "NUMBER"
    number: float

    def to_input(self) -> dict[str, Any]:
        return {"number": self.number}

    def display(self) -> str:
        if self.number.is_integer():
            return str(int(self.number))
        return repr(self.number)


class DateValue(BaseModel):
    kind: Literal["DATE"] = "DATE"
    date: str

    def to_input(self) -> dict[str, Any]:
        return {"date": self.date}

    def display(self) -> str:
        return self.date


class SingleSelectValue(BaseModel):
    kind: Literal["SINGLE_SELECT"] = "SINGLE_SELECT"
    single_select_option_id: str

    def to_input(self) -> dict[str, Any]:
        return {"singleSelectOptionId": self.single_select_option_id}

    def display(self) -> str:
        return self.single_select_option_id


class IterationValue(BaseModel):
    kind: Literal["ITERATION"] = "ITERATION"
    iteration_id: str

    def to_input(self) -> dict[str, Any]:
        return {"iterationId": self.iteration_id}

    def display(self) -> str:
        return self.iteration_id


FieldValue = Annotated[
    TextValue | NumberValue | DateValue | SingleSelectValue | IterationValue,
    Field(discriminator="kind"),
]
"""Typed payload of ``updateProjectV2ItemFieldValue``, one variant per data type."""


class ResolvedFieldValue(BaseModel):
    """A requested field matched against the schema and ready to send."""

    field_key: str
    field_id: str
    value: FieldValue

    model_config = {"frozen": True}
