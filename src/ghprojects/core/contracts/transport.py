"""Remote API transport contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class GraphQLExecutor(Protocol):
    """Anything that can run one GraphQL operation and return its ``data``."""

    async def execute(self, query: str, variables: Mapping[str, Any] | None = None) -> dict[str, Any]: ...
