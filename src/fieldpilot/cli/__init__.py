"""Command-line interface for fieldpilot."""

from fieldpilot.cli.app import main, run_update
from fieldpilot.cli.parser import build_parser
from fieldpilot.cli.report import format_report_lines, render_outcome, render_report

__all__ = ["build_parser", "format_report_lines", "main", "render_outcome", "render_report", "run_update"]
