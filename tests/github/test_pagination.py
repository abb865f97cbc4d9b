from __future__ import annotations

import pytest

from ghprojects.core.contracts.exceptions import ProviderError
from ghprojects.core.github.pagination import iter_pages
from ghprojects.core.github.queries import PROJECT_ITEMS
from tests.fakes.client import FakeGraphQLClient, paged, project_connection

PATH = ("repository", "projectV2", "items")


@pytest.mark.asyncio
async def test_iter_pages_follows_cursors_until_last_page() -> None:
    client = FakeGraphQLClient().on(
        "RepositoryProjectV2Items",
        paged([[{"id": "PVTI_1"}], [{"id": "PVTI_2"}], [{"id": "PVTI_3"}]], project_connection("items")),
    )

    pages = [page async for page in iter_pages(client, PROJECT_ITEMS, {"owner": "o", "name": "r", "number": 1}, PATH)]

    assert [node["id"] for page in pages for node in page.nodes] == ["PVTI_1", "PVTI_2", "PVTI_3"]
    assert pages[0].total_count == 3
    assert [call["after"] for call in client.calls_to("RepositoryProjectV2Items")] == [None, "cursor-1", "cursor-2"]
    assert all(call["first"] == 30 for call in client.calls_to("RepositoryProjectV2Items"))


@pytest.mark.asyncio
async def test_iter_pages_rejects_cursor_that_does_not_advance() -> None:
    stuck = {
        "totalCount": 2,
        "nodes": [{"id": "PVTI_1"}],
        "pageInfo": {"hasNextPage": True, "endCursor": None},
    }
    client = FakeGraphQLClient().on("RepositoryProjectV2Items", {"repository": {"projectV2": {"items": stuck}}})

    with pytest.raises(ProviderError, match="did not advance"):
        async for _ in iter_pages(client, PROJECT_ITEMS, {}, PATH):
            pass


@pytest.mark.asyncio
async def test_iter_pages_requires_connection_at_path() -> None:
    client = FakeGraphQLClient().on("RepositoryProjectV2Items", {"repository": {"projectV2": None}})

    with pytest.raises(ProviderError, match="projectV2"):
        async for _ in iter_pages(client, PROJECT_ITEMS, {}, PATH):
            pass
