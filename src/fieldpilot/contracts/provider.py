"""Project provider contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from fieldpilot.contracts.project import ProjectField, ProjectReference, ResolvedFieldValue


class ProjectProvider(ABC):
    @abstractmethod
    async def __aenter__(self) -> ProjectProvider: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def resolve_project_id(self, project: ProjectReference) -> str: ...

    @abstractmethod
    async def fetch_fields(self, project_id: str) -> list[ProjectField]: ...

    @abstractmethod
    async def update_field_value(self, *, project_id: str, item_id: str, resolved: ResolvedFieldValue) -> str:
        """Apply one field value and return the updated item id."""
