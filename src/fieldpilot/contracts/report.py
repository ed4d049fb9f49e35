"""Per-field outcomes of an update run."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class OutcomeStatus(str, Enum):
    UPDATED = "updated"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class FieldUpdateOutcome(BaseModel):
    field_key: str
    status: OutcomeStatus
    value: str | None = None
    item_id: str | None = None
    error: str | None = None

    model_config = {"frozen": True}

    @property
    def message(self) -> str:
        """Human-readable status line."""
        if self.status is OutcomeStatus.UPDATED:
            return f"Successfully updated field '{self.field_key}' with value '{self.value}' for item: {self.item_id}."
        if self.status is OutcomeStatus.NOT_FOUND:
            return f"Failed to find field with name '{self.field_key}'."
        return f"Failed to update field '{self.field_key}' with value '{self.value}'. {self.error}"


class UpdateReport(BaseModel):
    project_id: str
    item_id: str
    outcomes: list[FieldUpdateOutcome] = Field(default_factory=list)

    def _with_status(self, status: OutcomeStatus) -> list[FieldUpdateOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @property
    def updated(self) -> list[FieldUpdateOutcome]:
        return self._with_status(OutcomeStatus.UPDATED)

    @property
    def not_found(self) -> list[FieldUpdateOutcome]:
        return self._with_status(OutcomeStatus.NOT_FOUND)

    @property
    def failed(self) -> list[FieldUpdateOutcome]:
        return self._with_status(OutcomeStatus.FAILED)
