"""Pairing of the comma-separated field key and value inputs."""

from __future__ import annotations


def build_field_map(field_keys: str, field_values: str) -> dict[str, str]:
    """Zip comma-separated keys and values by position.

    A key is kept only when the value at the same position exists and is
    non-empty. Surplus values are ignored and a repeated key keeps its last
    value.
    """
    values = field_values.split(",")
    fields: dict[str, str] = {}
    for index, key in enumerate(field_keys.split(",")):
        if index < len(values) and values[index]:
            fields[key] = values[index]
    return fields
