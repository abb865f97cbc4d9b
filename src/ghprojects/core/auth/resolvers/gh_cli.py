"""GitHub CLI token resolver."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from ghprojects.core.auth.base import NOT_AUTHENTICATED, TokenResolver
from ghprojects.core.contracts.config import DEFAULT_HOST
from ghprojects.core.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class GhCliTokenResolver(TokenResolver):
    hostname: str = DEFAULT_HOST

    async def resolve(self) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                "gh",
                "auth",
                "token",
                "--hostname",
                self.hostname,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"Failed to execute gh CLI: {exc}") from exc

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            details = stderr.decode(errors="replace").strip()
            message = f"not logged in to {self.hostname}; {NOT_AUTHENTICATED}"
            if details:
                message = f"{message} ({details})"
            raise AuthenticationError(message)

        token = stdout.decode(errors="replace").strip()
        if not token:
            raise AuthenticationError(f"gh auth token returned an empty token for host {self.hostname}")

        return token
