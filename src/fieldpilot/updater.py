"""Single-pass update of project field values on one item."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fieldpilot.auth import create_token_resolver
from fieldpilot.contracts.config import ActionInputs
from fieldpilot.contracts.exceptions import InvalidFieldValueError, ProviderError
from fieldpilot.contracts.project import ProjectField, ResolvedFieldValue
from fieldpilot.contracts.provider import ProjectProvider
from fieldpilot.contracts.report import FieldUpdateOutcome, OutcomeStatus, UpdateReport
from fieldpilot.fields.field_map import build_field_map
from fieldpilot.fields.resolver import find_field, resolve_field_value
from fieldpilot.providers import create_provider
from fieldpilot.targets.github_project import parse_project_url

_LOG = logging.getLogger(__name__)

OutcomeCallback = Callable[[FieldUpdateOutcome], None]


class FieldUpdater:
    """Resolves requested field values against a project and applies them.

    Lookups run strictly in sequence and updates are applied one at a time.
    A failed update is recorded and the next field is still attempted;
    previously applied updates are never rolled back.

    *on_outcome* is called with each outcome as soon as it is known, so
    callers see applied updates even when a later field aborts the run.
    """

    def __init__(
        self,
        provider: ProjectProvider,
        inputs: ActionInputs,
        *,
        on_outcome: OutcomeCallback | None = None,
    ) -> None:
        self._provider = provider
        self._inputs = inputs
        self._on_outcome = on_outcome

    async def run(self) -> UpdateReport:
        project = parse_project_url(self._inputs.project_url)
        fields_map = build_field_map(self._inputs.field_keys, self._inputs.field_values)
        item_id = self._inputs.item_id

        project_id = await self._provider.resolve_project_id(project)
        report = UpdateReport(project_id=project_id, item_id=item_id)
        if not fields_map:
            _LOG.info("No field values to update.")
            return report

        schema = await self._provider.fetch_fields(project_id)
        for key, raw_value in fields_map.items():
            outcome = await self._update_one(project_id, item_id, schema, key, raw_value)
            _LOG.info(outcome.message)
            report.outcomes.append(outcome)
            if self._on_outcome is not None:
                self._on_outcome(outcome)
        return report

    async def _update_one(
        self,
        project_id: str,
        item_id: str,
        schema: list[ProjectField],
        key: str,
        raw_value: str,
    ) -> FieldUpdateOutcome:
        field = find_field(schema, key)
        if field is None:
            return FieldUpdateOutcome(field_key=key, status=OutcomeStatus.NOT_FOUND, value=raw_value)

        try:
            resolved = resolve_field_value(field, key, raw_value)
        except InvalidFieldValueError as exc:
            return FieldUpdateOutcome(field_key=key, status=OutcomeStatus.FAILED, value=raw_value, error=str(exc))

        return await self._apply(project_id, item_id, resolved)

    async def _apply(self, project_id: str, item_id: str, resolved: ResolvedFieldValue) -> FieldUpdateOutcome:
        value = resolved.value.display()
        try:
            updated_item_id = await self._provider.update_field_value(
                project_id=project_id,
                item_id=item_id,
                resolved=resolved,
            )
        except ProviderError as exc:
            return FieldUpdateOutcome(
                field_key=resolved.field_key,
                status=OutcomeStatus.FAILED,
                value=value,
                error=exc.details(),
            )
        return FieldUpdateOutcome(
            field_key=resolved.field_key,
            status=OutcomeStatus.UPDATED,
            value=value,
            item_id=updated_item_id,
        )


async def update_project(
    inputs: ActionInputs,
    *,
    provider: ProjectProvider | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> UpdateReport:
    """Run one update pass for *inputs*.

    When no provider is given, a GitHub provider is built from the resolved
    token and closed once the pass completes.
    """
    # Malformed URLs abort before credentials are touched.
    parse_project_url(inputs.project_url)
    if provider is None:
        token = await create_token_resolver(inputs).resolve()
        provider = create_provider(inputs, token=token)
    async with provider:
        return await FieldUpdater(provider, inputs, on_outcome=on_outcome).run()
