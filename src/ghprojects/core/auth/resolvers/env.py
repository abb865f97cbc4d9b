"""Environment token resolver."""

from __future__ import annotations

import os

from ghprojects.core.auth.base import NOT_AUTHENTICATED, TokenResolver
from ghprojects.core.contracts.exceptions import AuthenticationError

TOKEN_VARIABLES = ("GH_TOKEN", "GITHUB_TOKEN")


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        for name in TOKEN_VARIABLES:
            token = (os.getenv(name) or "").strip()
            if token:
                return token
        raise AuthenticationError(f"GH_TOKEN and GITHUB_TOKEN are not set; {NOT_AUTHENTICATED}")
