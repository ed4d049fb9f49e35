"""Tests for action input loading."""

from __future__ import annotations

import pytest

from fieldpilot.config import input_env_name, load_inputs
from fieldpilot.contracts.exceptions import ConfigError


def _environ(**overrides: str) -> dict[str, str]:
    environ = {
        "INPUT_PROJECT-URL": "https://github.com/users/octocat/projects/1",
        "INPUT_GITHUB-TOKEN": "gh_token",
        "INPUT_ITEM-ID": "project-item-id",
        "INPUT_FIELD-KEYS": "field-text",
        "INPUT_FIELD-VALUES": "field-value",
    }
    environ.update(overrides)
    return environ


def test_input_env_name_matches_actions_runner_convention() -> None:
    assert input_env_name("project-url") == "INPUT_PROJECT-URL"
    assert input_env_name("my input") == "INPUT_MY_INPUT"


def test_load_inputs_reads_actions_environment() -> None:
    inputs = load_inputs(_environ())

    assert inputs.project_url == "https://github.com/users/octocat/projects/1"
    assert inputs.github_token == "gh_token"
    assert inputs.item_id == "project-item-id"
    assert inputs.field_keys == "field-text"
    assert inputs.field_values == "field-value"


def test_overrides_take_precedence_over_environment() -> None:
    inputs = load_inputs(_environ(), field_keys="Status", item_id=None)

    assert inputs.field_keys == "Status"
    assert inputs.item_id == "project-item-id"


def test_load_inputs_from_overrides_only() -> None:
    inputs = load_inputs(
        {},
        project_url="https://github.com/orgs/acme/projects/2",
        item_id="PVTI_2",
        field_keys="Status",
        field_values="Done",
    )

    assert inputs.project_url == "https://github.com/orgs/acme/projects/2"
    assert inputs.github_token is None


def test_graphql_url_comes_from_runner_environment() -> None:
    inputs = load_inputs(_environ(GITHUB_GRAPHQL_URL="https://ghe.example.com/api/graphql"))

    assert inputs.graphql_url == "https://ghe.example.com/api/graphql"


def test_graphql_url_override() -> None:
    inputs = load_inputs(_environ(), graphql_url="https://ghe.example.com/api/graphql")

    assert inputs.graphql_url == "https://ghe.example.com/api/graphql"


def test_blank_token_input_is_treated_as_missing() -> None:
    inputs = load_inputs(_environ(**{"INPUT_GITHUB-TOKEN": ""}))

    assert inputs.github_token is None


@pytest.mark.parametrize("variable", ["INPUT_PROJECT-URL", "INPUT_ITEM-ID", "INPUT_FIELD-KEYS", "INPUT_FIELD-VALUES"])
def test_missing_required_input_raises_config_error(variable: str) -> None:
    environ = _environ()
    del environ[variable]
    name = variable.removeprefix("INPUT_").lower()

    with pytest.raises(ConfigError, match=f"^Input required and not supplied: {name}$"):
        load_inputs(environ)


def test_reads_process_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in _environ().items():
        monkeypatch.setenv(key, value)

    inputs = load_inputs()

    assert inputs.item_id == "project-item-id"
