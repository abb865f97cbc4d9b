"""Auth resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

NOT_AUTHENTICATED = "use `gh auth login -s project` to authenticate with required scopes"


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Resolve and return an authentication token."""
