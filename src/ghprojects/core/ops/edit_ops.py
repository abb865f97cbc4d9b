"""Edit operation: scalar updates plus bulk add and remove of items."""

from __future__ import annotations

from ghprojects.core.contracts.config import DEFAULT_WORKER_COUNT, Repository
from ghprojects.core.contracts.edit import EditRequest, EditResult
from ghprojects.core.contracts.exceptions import GhProjectsError
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.engine.fields import FieldResolver
from ghprojects.core.engine.items import ItemPipeline
from ghprojects.core.engine.pool import ADD_PHASE, AddItemsOrchestrator
from ghprojects.core.engine.progress import EditProgress, NullEditProgress
from ghprojects.core.engine.removal import REMOVE_PHASE, RemovalResolver
from ghprojects.core.ops.board import get_project, update_project
from ghprojects.core.utils import pluralize


async def run_edit(
    client: GraphQLExecutor,
    repo: Repository,
    request: EditRequest,
    *,
    worker_count: int = DEFAULT_WORKER_COUNT,
    progress: EditProgress | None = None,
) -> EditResult:
    progress = progress or NullEditProgress()
    project = await get_project(client, repo, request.number, progress=progress)
    await update_project(client, project.id, request.changes)

    items_added = 0
    if request.add_items:
        count = pluralize(len(request.add_items), "issue")
        progress.phase_start(ADD_PHASE, total=len(request.add_items), label=f"Adding {count} to {project.url}")
        try:
            # Every field must resolve before the first item is touched.
            fields = await FieldResolver(client, repo, request.number).resolve(request.fields)
            pipeline = ItemPipeline(client, repo, project.id)
            orchestrator = AddItemsOrchestrator(pipeline, worker_count=worker_count, progress=progress)
            units = await orchestrator.run(request.add_items, fields)
        except GhProjectsError as exc:
            progress.phase_error(ADD_PHASE, exc)
            raise
        progress.phase_done(ADD_PHASE)
        items_added = len(units)

    items_removed = 0
    if request.remove_items:
        count = pluralize(len(request.remove_items), "issue")
        progress.phase_start(REMOVE_PHASE, total=len(request.remove_items), label=f"Removing {count} {project.url}")
        try:
            removed = await RemovalResolver(client, repo, request.number, project.id, progress=progress).remove(
                request.remove_items
            )
        except GhProjectsError as exc:
            progress.phase_error(REMOVE_PHASE, exc)
            raise
        progress.phase_done(REMOVE_PHASE)
        items_removed = len(removed)

    return EditResult(project_url=project.url, items_added=items_added, items_removed=items_removed)
