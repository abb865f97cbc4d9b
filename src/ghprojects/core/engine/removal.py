"""Removal of issues and pull requests from a project."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.exceptions import ItemNotReferencedError
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.engine.progress import EditProgress, NullEditProgress
from ghprojects.core.github.mapper import item_from_node
from ghprojects.core.github.pagination import iter_pages
from ghprojects.core.github.queries import DELETE_PROJECT_ITEM, PROJECT_ITEMS

_LOG = logging.getLogger(__name__)

REMOVE_PHASE = "Remove"

_ITEMS_PATH = ("repository", "projectV2", "items")


class RemovalResolver:
    """Maps item numbers to project item ids and deletes them.

    Every requested number is validated before the first deletion, so an
    unknown number leaves the project untouched.
    """

    def __init__(
        self,
        client: GraphQLExecutor,
        repo: Repository,
        number: int,
        project_id: str,
        *,
        progress: EditProgress | None = None,
    ) -> None:
        self._client = client
        self._repo = repo
        self._number = number
        self._project_id = project_id
        self._progress = progress or NullEditProgress()

    async def remove(self, item_numbers: Sequence[int]) -> list[str]:
        """Delete the items for *item_numbers* in caller order and return their ids."""
        if not item_numbers:
            return []

        item_ids = await self.item_ids_by_number()
        targets: list[str] = []
        for number in item_numbers:
            item_id = item_ids.get(number)
            if item_id is None:
                raise ItemNotReferencedError(number)
            targets.append(item_id)

        for number, item_id in zip(item_numbers, targets, strict=True):
            await self._client.execute(DELETE_PROJECT_ITEM, {"id": self._project_id, "itemId": item_id})
            _LOG.debug("Removed #%d (%s)", number, item_id)
            self._progress.item_done(REMOVE_PHASE)
        return targets

    async def item_ids_by_number(self) -> dict[int, str]:
        """Drain the project's item listing into a content number to item id map."""
        item_ids: dict[int, str] = {}
        variables = {"owner": self._repo.owner, "name": self._repo.name, "number": self._number}
        async for page in iter_pages(self._client, PROJECT_ITEMS, variables, _ITEMS_PATH):
            for node in page.nodes:
                item = item_from_node(node)
                # Draft issues carry no number.
                if item.content.number:
                    item_ids[item.content.number] = item.id
        return item_ids
