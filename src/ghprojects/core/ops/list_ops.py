"""List operation."""

from __future__ import annotations

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.edit import ProjectState
from ghprojects.core.contracts.project import Project, ProjectList
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.github.mapper import project_from_node
from ghprojects.core.github.pagination import iter_pages
from ghprojects.core.github.queries import LIST_PROJECTS

_PROJECTS_PATH = ("repository", "projectsV2")


def _matches_state(project: Project, state: ProjectState) -> bool:
    if state == ProjectState.ALL:
        return True
    return project.closed == (state == ProjectState.CLOSED)


async def list_projects(
    client: GraphQLExecutor,
    repo: Repository,
    *,
    search: str | None = None,
    state: ProjectState = ProjectState.OPEN,
) -> ProjectList:
    variables = {"owner": repo.owner, "name": repo.name, "search": search or None}
    projects: list[Project] = []
    async for page in iter_pages(client, LIST_PROJECTS, variables, _PROJECTS_PATH):
        projects.extend(project_from_node(node) for node in page.nodes)

    # projectsV2 has no state argument; filter locally.
    projects = [project for project in projects if _matches_state(project, state)]
    return ProjectList(total_count=len(projects), projects=projects)
