"""List command."""

from __future__ import annotations

import argparse

from rich.console import Console

from ghprojects import ProjectList
from ghprojects.cli.render.formatter import ProjectFormatter


async def run_list(args: argparse.Namespace, *, console: Console | None = None) -> ProjectList:
    import ghprojects.cli as cli

    config = cli.load_config(repo=args.repo, auth=args.auth, verbose=args.verbose)
    sdk = await cli.GhProjects.from_config(config)
    result = await sdk.list_projects(search=args.search, state=args.state)

    ProjectFormatter(console or Console()).projects(result)
    return result


__all__ = ["run_list"]
