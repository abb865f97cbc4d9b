"""View command."""

from __future__ import annotations

import argparse

from rich.console import Console

from ghprojects import Project
from ghprojects.cli.render.formatter import ProjectFormatter


async def run_view(args: argparse.Namespace, *, console: Console | None = None) -> Project:
    import ghprojects.cli as cli

    config = cli.load_config(repo=args.repo, auth=args.auth, verbose=args.verbose)
    sdk = await cli.GhProjects.from_config(config)
    project = await sdk.view_project(args.number)

    ProjectFormatter(console or Console()).project(project)
    return project


__all__ = ["run_view"]
