"""Action input loading."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from fieldpilot.contracts.config import ActionInputs
from fieldpilot.contracts.exceptions import ConfigError

INPUT_NAMES: tuple[str, ...] = ("project-url", "github-token", "item-id", "field-keys", "field-values")


def input_env_name(name: str) -> str:
    """Environment variable a GitHub Actions runner uses for input *name*."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def _format_validation_error(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        message = str(error.get("msg", ""))
        messages.append(message.removeprefix("Value error, "))
    return "; ".join(messages)


def load_inputs(environ: Mapping[str, str] | None = None, **overrides: str | None) -> ActionInputs:
    """Build :class:`ActionInputs` from ``INPUT_*`` variables and overrides.

    Overrides use the input names with underscores (``project_url=...``) and
    take precedence over the environment when not None. The GraphQL endpoint
    comes from ``GITHUB_GRAPHQL_URL`` when set.

    Raises:
        ConfigError: If a required input is missing or blank.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for name in INPUT_NAMES:
        value = env.get(input_env_name(name))
        if value is not None:
            raw[name] = value
    graphql_url = env.get("GITHUB_GRAPHQL_URL")
    if graphql_url:
        raw["graphql_url"] = graphql_url

    for key, value in overrides.items():
        if value is None:
            continue
        name = key.replace("_", "-")
        raw[name if name in INPUT_NAMES else key] = value

    for name in INPUT_NAMES:
        if name != "github-token":
            raw.setdefault(name, "")
    if not (raw.get("github-token") or "").strip():
        raw.pop("github-token", None)

    try:
        return ActionInputs.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(exc)) from exc
