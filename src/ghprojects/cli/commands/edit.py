"""Edit command."""

from __future__ import annotations

import argparse
from typing import TextIO

from pydantic import ValidationError
from rich.console import Console

from ghprojects import ConfigError, EditRequest, EditResult, pluralize
from ghprojects.cli.common import build_changes, open_progress


def build_edit_request(args: argparse.Namespace, stdin: TextIO | None = None) -> EditRequest:
    fields = dict(args.fields)
    if fields and not args.add_issues:
        raise ConfigError("--field requires --add-issue")
    try:
        return EditRequest(
            number=args.number,
            changes=build_changes(args, stdin),
            add_items=args.add_issues,
            remove_items=args.remove_issues,
            fields=fields,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid edit request: {exc}") from exc


def format_edit_summary(result: EditResult, *, verbose: bool, is_terminal: bool) -> list[str]:
    """Lines printed after a successful edit; nothing at all when piped."""
    if not is_terminal:
        return []
    lines: list[str] = []
    if verbose and result.items_added:
        lines.append(f"Added {pluralize(result.items_added, 'issue')}")
    if verbose and result.items_removed:
        lines.append(f"Removed {pluralize(result.items_removed, 'issue')}")
    lines.append(result.project_url)
    return lines


async def run_edit(args: argparse.Namespace, *, console: Console | None = None) -> EditResult:
    import ghprojects.cli as cli

    console = console or Console()
    request = build_edit_request(args)
    config = cli.load_config(repo=args.repo, auth=args.auth, verbose=args.verbose)

    with open_progress(args.verbose) as progress:
        sdk = await cli.GhProjects.from_config(config, progress=progress)
        result = await sdk.edit_project(request)

    for line in format_edit_summary(result, verbose=args.verbose, is_terminal=console.is_terminal):
        console.print(line, markup=False, highlight=False, soft_wrap=True)
    return result


__all__ = ["build_edit_request", "format_edit_summary", "run_edit"]
