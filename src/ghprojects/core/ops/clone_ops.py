"""Clone operation."""

from __future__ import annotations

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.edit import CloneRequest, CloneResult
from ghprojects.core.contracts.exceptions import GhProjectsError, ProjectNotFoundError
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.engine.progress import EditProgress, NullEditProgress
from ghprojects.core.github.mapper import dig, require_str
from ghprojects.core.github.queries import COPY_PROJECT
from ghprojects.core.ops.board import find_repository_project, update_project

CLONE_PHASE = "Clone"


async def run_clone(
    client: GraphQLExecutor,
    repo: Repository,
    request: CloneRequest,
    *,
    progress: EditProgress | None = None,
) -> CloneResult:
    """Copy a project to the authenticated user, then apply any overrides.

    The copy stays private unless the source is public or ``public`` is overridden.
    """
    progress = progress or NullEditProgress()
    source = await find_repository_project(client, repo, request.number)
    if source is None:
        raise ProjectNotFoundError(f'project #{request.number} not found for repository "{repo.full_name}"')

    changes = request.changes
    if changes.public is None and source.public:
        changes = changes.model_copy(update={"public": True})

    progress.phase_start(CLONE_PHASE, label=f"Cloning {source.url}")
    try:
        data = await client.execute(
            COPY_PROJECT,
            {
                "ownerId": source.viewer_id,
                "projectId": source.id,
                "title": changes.title,
                "drafts": request.include_drafts,
            },
        )
        copied = dig(data, "copyProjectV2", "projectV2")
        project_id = require_str(copied, "id")
        await update_project(client, project_id, changes, title_requires_update=False)
    except GhProjectsError as exc:
        progress.phase_error(CLONE_PHASE, exc)
        raise
    progress.phase_done(CLONE_PHASE)
    return CloneResult(project_id=project_id, project_url=str(copied.get("url") or ""))
