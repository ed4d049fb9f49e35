"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console

from fieldpilot.cli.parser import build_parser
from fieldpilot.cli.report import render_outcome
from fieldpilot.config import load_inputs
from fieldpilot.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ProviderError,
    UnsupportedDataTypeError,
)
from fieldpilot.contracts.report import UpdateReport
from fieldpilot.updater import update_project


async def run_update(args: argparse.Namespace, console: Console | None = None) -> UpdateReport:
    """Load inputs and run one pass, printing each status line as it lands."""
    console = console or Console(highlight=False)
    inputs = load_inputs(
        project_url=args.project_url,
        github_token=args.github_token,
        item_id=args.item_id,
        field_keys=args.field_keys,
        field_values=args.field_values,
        graphql_url=args.graphql_url,
    )
    return await update_project(inputs, on_outcome=lambda outcome: render_outcome(outcome, console))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        asyncio.run(run_update(args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except UnsupportedDataTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
