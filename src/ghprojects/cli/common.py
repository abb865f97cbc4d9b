"""Shared CLI argument parsing and output helpers."""

from __future__ import annotations

import argparse
import sys
from contextlib import AbstractContextManager, nullcontext
from typing import TextIO

from ghprojects import EditProgress, ProjectChanges
from ghprojects.cli.progress.rich import RichEditProgress


def parse_number(value: str, what: str = "issue") -> int:
    """Parse ``"12"`` or ``"#12"`` into a positive number."""
    raw = value.strip().removeprefix("#")
    if not raw.isdigit() or int(raw) < 1:
        raise argparse.ArgumentTypeError(f"invalid {what} number: {value}")
    return int(raw)


def project_number(value: str) -> int:
    return parse_number(value, "project")


def issue_numbers(value: str) -> list[int]:
    """Parse a comma-separated list of issue or pull request numbers."""
    return [parse_number(part) for part in value.split(",") if part.strip()]


def field_assignments(value: str) -> list[tuple[str, str]]:
    """Parse comma-separated ``NAME=VALUE`` pairs."""
    pairs: list[tuple[str, str]] = []
    for part in value.split(","):
        name, sep, field_value = part.partition("=")
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f'invalid field assignment "{part}": expected NAME=VALUE')
        pairs.append((name.strip(), field_value))
    return pairs


def read_body(value: str | None, stdin: TextIO | None = None) -> str | None:
    if value == "-":
        return (stdin or sys.stdin).read()
    return value


def build_changes(args: argparse.Namespace, stdin: TextIO | None = None) -> ProjectChanges:
    return ProjectChanges(
        title=args.title or "",
        description=args.description,
        body=read_body(args.body, stdin),
        public=args.public,
    )


def open_progress(verbose: bool) -> AbstractContextManager[EditProgress | None]:
    """Rich spinners on an interactive stderr; nothing when verbose logging is on."""
    if verbose or not sys.stderr.isatty():
        return nullcontext()
    return RichEditProgress()
