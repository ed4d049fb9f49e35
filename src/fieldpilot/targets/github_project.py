"""GitHub project URL parsing utilities."""

from __future__ import annotations

import re

from fieldpilot.contracts.exceptions import ProjectURLError, UnsupportedOwnerTypeError
from fieldpilot.contracts.project import OwnerTypeQuery, ProjectReference

# https://github.com/orgs|users/<ownerName>/projects/<projectNumber>
_PROJECT_RE = re.compile(
    r"^(?:https://)?github\.com/(?P<owner_type>orgs|users)/(?P<owner_name>[^/]+)/projects/(?P<project_number>\d+)"
)

_OWNER_TYPE_QUERIES: dict[str, OwnerTypeQuery] = {
    "orgs": "organization",
    "users": "user",
}


def must_get_owner_type_query(owner_type: str | None) -> OwnerTypeQuery:
    """Map a URL owner segment to the GraphQL owner field name."""
    query = _OWNER_TYPE_QUERIES.get(owner_type or "")
    if query is None:
        raise UnsupportedOwnerTypeError(owner_type)
    return query


def parse_project_url(url: str) -> ProjectReference:
    """Parse a GitHub project URL.

    Anything after the project number (views, query strings) is ignored.

    Raises:
        ProjectURLError: If the URL does not match the expected shape.
    """
    match = _PROJECT_RE.match(url)
    if match is None:
        raise ProjectURLError(url)
    project_number = int(match.group("project_number"))
    if project_number == 0:
        raise ProjectURLError(url)
    return ProjectReference(
        owner_type=must_get_owner_type_query(match.group("owner_type")),
        owner_name=match.group("owner_name"),
        project_number=project_number,
    )
