"""Project operations composed from the GitHub transport and the engine."""

from ghprojects.core.ops.board import LINK_PHASE, ProjectRef, find_repository_project, get_project, update_project
from ghprojects.core.ops.clone_ops import CLONE_PHASE, run_clone
from ghprojects.core.ops.edit_ops import run_edit
from ghprojects.core.ops.list_ops import list_projects
from ghprojects.core.ops.view_ops import view_project

__all__ = [
    "CLONE_PHASE",
    "LINK_PHASE",
    "ProjectRef",
    "find_repository_project",
    "get_project",
    "list_projects",
    "run_clone",
    "run_edit",
    "update_project",
    "view_project",
]
