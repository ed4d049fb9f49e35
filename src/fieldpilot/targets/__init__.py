"""Target URL parsers."""

from fieldpilot.targets.github_project import must_get_owner_type_query, parse_project_url

__all__ = ["must_get_owner_type_query", "parse_project_url"]
