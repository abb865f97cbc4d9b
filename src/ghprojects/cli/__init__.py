"""Command-line interface for ghprojects."""

from __future__ import annotations

import asyncio
import logging as logging

from ghprojects import GhProjects as GhProjects
from ghprojects import load_config as load_config
from ghprojects.cli.app import main as main
from ghprojects.cli.commands import clone as clone_command
from ghprojects.cli.commands import edit as edit_command
from ghprojects.cli.commands import list as list_command
from ghprojects.cli.commands import view as view_command
from ghprojects.cli.parser import build_parser as build_parser

_run_list = list_command.run_list
_run_view = view_command.run_view
_run_clone = clone_command.run_clone
_run_edit = edit_command.run_edit

__all__ = ["build_parser", "main"]
