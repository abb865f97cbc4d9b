"""Config loading from flags, environment and the local git checkout."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from collections.abc import Mapping

from pydantic import ValidationError

from ghprojects.core.contracts.config import DEFAULT_HOST, DEFAULT_WORKER_COUNT, ProjectsConfig, Repository
from ghprojects.core.contracts.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

_SSH_RE = re.compile(r"^(?:ssh://)?git@(?P<host>[^:/]+)[:/](?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$")
_HTTPS_RE = re.compile(r"^https?://(?:[^@/]+@)?(?P<host>[^/]+)/(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$")


def parse_repository(value: str, *, default_host: str = DEFAULT_HOST) -> Repository:
    """Parse ``[HOST/]OWNER/REPO`` or a git SSH/HTTPS remote URL.

    Raises:
        ConfigError: The value names no repository.
    """
    raw = value.strip()
    for pattern in (_SSH_RE, _HTTPS_RE):
        match = pattern.match(raw)
        if match:
            return Repository(owner=match["owner"], name=match["name"], host=match["host"].lower())

    parts = raw.split("/")
    if len(parts) == 2 and all(parts):
        return Repository(owner=parts[0], name=parts[1], host=default_host)
    if len(parts) == 3 and all(parts):
        return Repository(owner=parts[1], name=parts[2], host=parts[0].lower())
    raise ConfigError(f'expected the "[HOST/]OWNER/REPO" format, got "{value}"')


def detect_repository() -> Repository | None:
    """Return the repository behind the ``origin`` remote of the working directory, if any."""
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        _LOG.debug("git remote lookup failed: %s", exc)
        return None
    if result.returncode != 0:
        return None

    try:
        return parse_repository(result.stdout.strip())
    except ConfigError:
        return None


def load_config(
    *,
    repo: str | None = None,
    auth: str | None = None,
    token: str | None = None,
    worker_count: int | None = None,
    verbose: bool = False,
    environ: Mapping[str, str] | None = None,
) -> ProjectsConfig:
    """Build a :class:`ProjectsConfig`, falling back to the environment then the git remote."""
    env = os.environ if environ is None else environ
    default_host = env.get("GH_HOST") or DEFAULT_HOST

    repo_value = repo or env.get("GH_REPO")
    if repo_value:
        repository = parse_repository(repo_value, default_host=default_host)
    else:
        detected = detect_repository()
        if detected is None:
            raise ConfigError("could not determine the repository; pass --repo OWNER/REPO or set GH_REPO")
        repository = detected

    auth_mode = auth or env.get("GHPROJECTS_AUTH") or "gh-cli"
    if auth_mode == "token" and not token:
        token = env.get("GH_TOKEN")

    try:
        return ProjectsConfig(
            repo=repository,
            auth=auth_mode,
            token=token,
            worker_count=worker_count or DEFAULT_WORKER_COUNT,
            verbose=verbose,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
