"""View operation."""

from __future__ import annotations

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.exceptions import GraphQLError, ProjectNotFoundError
from ghprojects.core.contracts.project import Project
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.github.mapper import dig, project_from_node
from ghprojects.core.github.queries import PAGE_SIZE, VIEW_PROJECT


async def view_project(client: GraphQLExecutor, repo: Repository, number: int, *, first: int = PAGE_SIZE) -> Project:
    """Fetch project *number* with its first *first* items."""
    variables = {"owner": repo.owner, "name": repo.name, "number": number, "first": first}
    not_found = ProjectNotFoundError(f'project #{number} not found for repository "{repo.full_name}"')
    try:
        data = await client.execute(VIEW_PROJECT, variables)
    except GraphQLError as exc:
        if exc.has_code("NOT_FOUND"):
            raise not_found from exc
        raise

    node = dig(data, "repository").get("projectV2")
    if not isinstance(node, dict):
        raise not_found
    return project_from_node(node)
