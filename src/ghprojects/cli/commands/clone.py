"""Clone command."""

from __future__ import annotations

import argparse
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console

from ghprojects import CloneRequest, CloneResult, ConfigError
from ghprojects.cli.common import build_changes, open_progress


def build_clone_request(args: argparse.Namespace, stdin: TextIO | None = None) -> CloneRequest:
    try:
        return CloneRequest(
            number=args.number,
            changes=build_changes(args, stdin),
            include_drafts=args.include_drafts,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid clone request: {exc}") from exc


async def run_clone(args: argparse.Namespace, *, console: Console | None = None) -> CloneResult:
    import ghprojects.cli as cli

    console = console or Console()
    request = build_clone_request(args)
    config = cli.load_config(repo=args.repo, auth=args.auth, verbose=args.verbose)

    with open_progress(args.verbose) as progress:
        sdk = await cli.GhProjects.from_config(config, progress=progress)
        result = await sdk.clone_project(request)

    if console.is_terminal:
        console.print(result.project_url, markup=False, highlight=False, soft_wrap=True)
    return result


__all__ = ["build_clone_request", "run_clone"]
