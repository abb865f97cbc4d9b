"""GraphQL query and mutation constants for GitHub Projects (v2)."""

PAGE_SIZE = 30

REPOSITORY_PROJECT_ID = """
query RepositoryProjectV2ID($owner: String!, $name: String!, $number: Int!) {
  viewer { id }
  repository(owner: $owner, name: $name) {
    projectV2(number: $number) { id url public }
  }
}
"""

OWNER_PROJECT_ID = """
query RepositoryOwnerProjectV2ID($owner: String!, $name: String!, $number: Int!) {
  repositoryOwner(login: $owner) {
    type: __typename
    repository(name: $name) { id }
    ... on ProjectV2Owner {
      projectV2(number: $number) { id url public }
    }
  }
}
"""

LINK_PROJECT = """
mutation LinkProjectV2ToRepository($projectId: ID!, $repositoryId: ID!) {
  linkProjectV2ToRepository(input: {projectId: $projectId, repositoryId: $repositoryId}) {
    repository { id }
  }
}
"""

UPDATE_PROJECT = """
mutation UpdateProjectV2($id: ID!, $title: String, $description: String, $body: String, $public: Boolean) {
  updateProjectV2(
    input: {projectId: $id, title: $title, shortDescription: $description, readme: $body, public: $public}
  ) {
    projectV2 { url }
  }
}
"""

COPY_PROJECT = """
mutation CopyProjectV2($ownerId: ID!, $projectId: ID!, $title: String!, $drafts: Boolean = false) {
  copyProjectV2(input: {ownerId: $ownerId, projectId: $projectId, title: $title, includeDraftIssues: $drafts}) {
    projectV2 { id url }
  }
}
"""

PROJECT_FIELDS = """
query RepositoryProjectV2Fields($owner: String!, $name: String!, $number: Int!, $first: Int!, $after: String) {
  repository(owner: $owner, name: $name) {
    projectV2(number: $number) {
      fields(first: $first, after: $after) {
        totalCount
        nodes {
          ... on ProjectV2Field { id name dataType }
          ... on ProjectV2IterationField {
            id name dataType
            configuration { iterations { id name: title } }
          }
          ... on ProjectV2SingleSelectField {
            id name dataType
            options { id name }
          }
        }
        pageInfo { hasNextPage endCursor }
      }
    }
  }
}
"""

ISSUE_OR_PULL_REQUEST_ID = """
query RepositoryIssueOrPullRequestID($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    issueOrPullRequest(number: $number) {
      ... on Issue { id }
      ... on PullRequest { id }
    }
  }
}
"""

ADD_PROJECT_ITEM = """
mutation AddProjectV2ItemById($id: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: {projectId: $id, contentId: $contentId}) {
    item { id }
  }
}
"""

UPDATE_ITEM_FIELD_VALUE = """
mutation UpdateProjectV2ItemFieldValue($projectId: ID!, $itemId: ID!, $fieldId: ID!, $value: ProjectV2FieldValue!) {
  updateProjectV2ItemFieldValue(
    input: {projectId: $projectId, itemId: $itemId, fieldId: $fieldId, value: $value}
  ) {
    projectV2Item { id }
  }
}
"""

PROJECT_ITEMS = """
query RepositoryProjectV2Items($owner: String!, $name: String!, $number: Int!, $first: Int!, $after: String) {
  repository(owner: $owner, name: $name) {
    projectV2(number: $number) {
      items(first: $first, after: $after) {
        totalCount
        nodes {
          id
          content {
            ... on Issue { id number }
            ... on PullRequest { id number }
          }
        }
        pageInfo { hasNextPage endCursor }
      }
    }
  }
}
"""

DELETE_PROJECT_ITEM = """
mutation DeleteProjectV2Item($id: ID!, $itemId: ID!) {
  deleteProjectV2Item(input: {projectId: $id, itemId: $itemId}) {
    deletedItemId
  }
}
"""

LIST_PROJECTS = """
query RepositoryProjectsV2($owner: String!, $name: String!, $first: Int!, $after: String, $search: String) {
  repository(owner: $owner, name: $name) {
    projectsV2(first: $first, after: $after, query: $search) {
      totalCount
      nodes {
        id number title shortDescription public closed url createdAt
        creator { login }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

VIEW_PROJECT = """
query RepositoryProjectV2($owner: String!, $name: String!, $number: Int!, $first: Int!) {
  repository(owner: $owner, name: $name) {
    projectV2(number: $number) {
      id number title shortDescription readme public closed url createdAt
      creator { login }
      items(first: $first) {
        totalCount
        nodes {
          id
          type
          content {
            ... on DraftIssue {
              id title createdAt
              creator { login }
            }
            ... on Issue {
              id number title state url createdAt
              creator: author { login }
            }
            ... on PullRequest {
              id number title state url createdAt
              creator: author { login }
            }
          }
        }
      }
    }
  }
}
"""
