"""Action input contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


class ActionInputs(BaseModel):
    """Declarative inputs of one update run.

    Field aliases are the action input names, so a mapping of raw inputs
    validates directly.
    """

    project_url: str = Field(alias="project-url")
    github_token: str | None = Field(default=None, alias="github-token", repr=False)
    item_id: str = Field(alias="item-id")
    field_keys: str = Field(alias="field-keys")
    field_values: str = Field(alias="field-values")
    graphql_url: str = DEFAULT_GRAPHQL_URL

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("project_url", "item_id", "field_keys", "field_values", mode="after")
    @classmethod
    def validate_required(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            alias = cls.model_fields[info.field_name].alias
            raise ValueError(f"Input required and not supplied: {alias}")
        return value

    @field_validator("graphql_url", mode="after")
    @classmethod
    def validate_graphql_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("https://", "http://")):
            raise ValueError("graphql_url must be an http(s) URL")
        return value
