"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("fieldpilot")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldpilot",
        description=(
            "Update custom field values of an item in a GitHub project. "
            "Options default to the matching INPUT_* environment variables of a GitHub Actions step."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--project-url", default=None, help="https://github.com/<orgs|users>/<owner>/projects/<n>")
    parser.add_argument("--github-token", default=None, help="Token for the GitHub API (default: GITHUB_TOKEN)")
    parser.add_argument("--item-id", default=None, help="Node id of the project item to update")
    parser.add_argument("--field-keys", default=None, help="Comma-separated field names")
    parser.add_argument("--field-values", default=None, help="Comma-separated values, paired with --field-keys")
    parser.add_argument("--graphql-url", default=None, help="GraphQL endpoint (default: GITHUB_GRAPHQL_URL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
