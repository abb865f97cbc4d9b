"""Project lookup, linking and scalar updates shared by edit and clone."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.edit import ProjectChanges
from ghprojects.core.contracts.exceptions import GraphQLError, ProjectNotFoundError, ProviderError
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.engine.progress import EditProgress, NullEditProgress
from ghprojects.core.github.queries import LINK_PROJECT, OWNER_PROJECT_ID, REPOSITORY_PROJECT_ID, UPDATE_PROJECT

_LOG = logging.getLogger(__name__)

LINK_PHASE = "Link"


@dataclass(frozen=True)
class ProjectRef:
    id: str
    url: str
    public: bool = False
    viewer_id: str = ""


def _project_ref(node: Any, *, viewer_id: str = "") -> ProjectRef | None:
    if not isinstance(node, dict) or not node.get("id"):
        return None
    return ProjectRef(
        id=str(node["id"]),
        url=str(node.get("url") or ""),
        public=bool(node.get("public")),
        viewer_id=viewer_id,
    )


async def _execute_allowing_not_found(
    client: GraphQLExecutor, query: str, variables: dict[str, Any]
) -> dict[str, Any]:
    # A missing project comes back as NOT_FOUND alongside the partial data.
    try:
        return await client.execute(query, variables)
    except GraphQLError as exc:
        if not exc.has_code("NOT_FOUND"):
            raise
        return exc.data or {}


async def find_repository_project(client: GraphQLExecutor, repo: Repository, number: int) -> ProjectRef | None:
    """Look up project *number* among the projects linked to *repo*."""
    variables = {"owner": repo.owner, "name": repo.name, "number": number}
    data = await _execute_allowing_not_found(client, REPOSITORY_PROJECT_ID, variables)
    viewer = data.get("viewer") or {}
    repository = data.get("repository") or {}
    return _project_ref(repository.get("projectV2"), viewer_id=str(viewer.get("id") or ""))


async def get_project(
    client: GraphQLExecutor,
    repo: Repository,
    number: int,
    *,
    progress: EditProgress | None = None,
) -> ProjectRef:
    """Resolve project *number* for *repo*, linking an owner-level project when needed.

    Raises:
        ProjectNotFoundError: Neither the repository nor its owner has the project.
    """
    project = await find_repository_project(client, repo, number)
    if project is not None:
        return project

    variables = {"owner": repo.owner, "name": repo.name, "number": number}
    data = await _execute_allowing_not_found(client, OWNER_PROJECT_ID, variables)
    owner = data.get("repositoryOwner") or {}
    project = _project_ref(owner.get("projectV2"))
    if project is None:
        owner_type = owner.get("type") or "owner"
        raise ProjectNotFoundError(f'project #{number} not found for {owner_type} "{repo.owner}"')

    repository = owner.get("repository") or {}
    progress = progress or NullEditProgress()
    progress.phase_start(LINK_PHASE, label=f'Linking project #{number} to "{repo.full_name}"')
    try:
        await client.execute(LINK_PROJECT, {"projectId": project.id, "repositoryId": repository.get("id")})
    except ProviderError as exc:
        progress.phase_error(LINK_PHASE, exc)
        raise ProviderError(f'failed to link project #{number} to "{repo.full_name}": {exc}') from exc
    progress.phase_done(LINK_PHASE)
    _LOG.debug("Linked project %s to %s", project.id, repo.full_name)
    return project


async def update_project(
    client: GraphQLExecutor,
    project_id: str,
    changes: ProjectChanges,
    *,
    title_requires_update: bool = True,
) -> bool:
    """Apply *changes* to the project; returns whether an update was sent.

    A title alone only triggers an update when *title_requires_update* is set,
    since a clone already carries its new title.
    """
    variables: dict[str, Any] = {"id": project_id}
    requires_update = title_requires_update and bool(changes.title)
    if changes.title:
        variables["title"] = changes.title
    for key, value in (("description", changes.description), ("body", changes.body), ("public", changes.public)):
        if value is not None:
            variables[key] = value
            requires_update = True

    if requires_update:
        await client.execute(UPDATE_PROJECT, variables)
    return requires_update
