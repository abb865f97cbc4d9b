"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from ghprojects import ProjectState
from ghprojects.cli.common import field_assignments, issue_numbers, project_number


def _package_version() -> str:
    try:
        return version("ghprojects")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo",
        "-R",
        default=None,
        metavar="[HOST/]OWNER/REPO",
        help="Select another repository (default: GH_REPO or the origin remote)",
    )
    parser.add_argument(
        "--auth",
        choices=["gh-cli", "env", "token"],
        default=None,
        help="Token source (default: GHPROJECTS_AUTH or gh-cli)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def _add_change_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("number", type=project_number, help='Project number; may begin with "#"')
    parser.add_argument("--description", "-d", default=None, help="Set the new short description")
    parser.add_argument("--body", "-b", default=None, help='Set the new body; "-" reads standard input')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghprojects", description="Work with GitHub Projects (v2)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List projects")
    list_parser.add_argument("--search", "-S", default=None, help="Search projects")
    list_parser.add_argument(
        "--state",
        "-s",
        type=ProjectState,
        choices=list(ProjectState),
        default=ProjectState.OPEN,
        help="Filter by state (default: open)",
    )
    _add_common_arguments(list_parser)

    view_parser = subparsers.add_parser("view", help="View a project")
    view_parser.add_argument("number", type=project_number, help='Project number; may begin with "#"')
    _add_common_arguments(view_parser)

    clone_parser = subparsers.add_parser("clone", help="Clone a project")
    _add_change_arguments(clone_parser)
    clone_parser.add_argument("--title", "-t", required=True, help="Set the new title")
    clone_parser.add_argument(
        "--public",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Set the visibility (default: copied from the cloned project)",
    )
    clone_parser.add_argument("--include-drafts", action="store_true", help="Include draft issues")
    _add_common_arguments(clone_parser)

    edit_parser = subparsers.add_parser("edit", help="Edit a project")
    _add_change_arguments(edit_parser)
    edit_parser.add_argument("--title", "-t", default=None, help="Set the new title")
    edit_parser.add_argument(
        "--public",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Set the visibility",
    )
    edit_parser.add_argument(
        "--add-issue",
        dest="add_issues",
        type=issue_numbers,
        action="extend",
        default=[],
        metavar="NUMBER[,NUMBER...]",
        help="Issues or pull requests to add",
    )
    edit_parser.add_argument(
        "--remove-issue",
        dest="remove_issues",
        type=issue_numbers,
        action="extend",
        default=[],
        metavar="NUMBER[,NUMBER...]",
        help="Issues or pull requests to remove",
    )
    edit_parser.add_argument(
        "--field",
        "-f",
        dest="fields",
        type=field_assignments,
        action="extend",
        default=[],
        metavar="NAME=VALUE",
        help="Set field values when adding issues",
    )
    _add_common_arguments(edit_parser)

    return parser


__all__ = ["build_parser"]
