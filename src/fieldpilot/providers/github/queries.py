"""GraphQL operations used by the GitHub project provider."""

from __future__ import annotations

from fieldpilot.contracts.project import OwnerTypeQuery


def get_project_query(owner_type: OwnerTypeQuery) -> str:
    """Project id lookup rooted at the organization or user owner field."""
    return f"""
query getProject($projectOwnerName: String!, $projectNumber: Int!) {{
  {owner_type}(login: $projectOwnerName) {{
    projectV2(number: $projectNumber) {{
      id
    }}
  }}
}}
"""


GET_PROJECT_FIELDS = """
query getProjectFields($projectId: ID!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      fields(first: 100) {
        nodes {
          ... on ProjectV2Field {
            id
            dataType
            name
          }
          ... on ProjectV2IterationField {
            id
            name
            dataType
            configuration {
              iterations {
                startDate
                id
              }
            }
          }
          ... on ProjectV2SingleSelectField {
            id
            name
            dataType
            options {
              id
              name
            }
          }
        }
      }
    }
  }
}
"""

UPDATE_PROJECT_FIELD_VALUE = """
mutation updateProjectV2ItemFieldValue($input: UpdateProjectV2ItemFieldValueInput!) {
  updateProjectV2ItemFieldValue(input: $input) {
    projectV2Item {
      id
    }
  }
}
"""
