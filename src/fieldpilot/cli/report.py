"""Rich rendering of update outcomes."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from fieldpilot.contracts.report import FieldUpdateOutcome, OutcomeStatus, UpdateReport

_STATUS_STYLES: dict[OutcomeStatus, str] = {
    OutcomeStatus.UPDATED: "green",
    OutcomeStatus.NOT_FOUND: "yellow",
    OutcomeStatus.FAILED: "red",
}


def format_report_lines(report: UpdateReport) -> list[str]:
    return [outcome.message for outcome in report.outcomes]


def render_outcome(outcome: FieldUpdateOutcome, console: Console) -> None:
    console.print(Text(outcome.message, style=_STATUS_STYLES[outcome.status]), soft_wrap=True)


def render_report(report: UpdateReport, console: Console | None = None) -> None:
    console = console or Console(highlight=False)
    for outcome in report.outcomes:
        render_outcome(outcome, console)
