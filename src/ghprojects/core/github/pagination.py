"""Cursor pagination over GraphQL connections."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ghprojects.core.contracts.exceptions import ProviderError
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.github.mapper import dig
from ghprojects.core.github.queries import PAGE_SIZE


@dataclass
class Page:
    nodes: list[dict[str, Any]] = field(default_factory=list)
    total_count: int = 0
    has_next_page: bool = False


async def iter_pages(
    client: GraphQLExecutor,
    query: str,
    variables: Mapping[str, Any],
    path: Sequence[str],
    *,
    page_size: int = PAGE_SIZE,
) -> AsyncIterator[Page]:
    """Yield each page of the connection found at *path* in the query's data.

    Stops after the last page; callers may stop earlier by breaking out.
    """
    page_vars = {**variables, "first": page_size, "after": None}
    while True:
        data = await client.execute(query, page_vars)
        connection = dig(data, *path)
        page_info = connection.get("pageInfo") or {}
        page = Page(
            nodes=[node for node in connection.get("nodes") or [] if isinstance(node, dict)],
            total_count=int(connection.get("totalCount") or 0),
            has_next_page=bool(page_info.get("hasNextPage")),
        )
        yield page

        if not page.has_next_page:
            return
        cursor = page_info.get("endCursor")
        if not cursor or cursor == page_vars["after"]:
            raise ProviderError(f"Pagination of '{'.'.join(path)}' did not advance past cursor {cursor!r}")
        page_vars["after"] = cursor
