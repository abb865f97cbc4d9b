"""Per-item add pipeline: resolve the reference, attach it, apply field values."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.edit import WorkUnit, WorkUnitState
from ghprojects.core.contracts.exceptions import FieldUpdateError, GraphQLError, ItemNotFoundError, ProviderError
from ghprojects.core.contracts.fields import ResolvedField
from ghprojects.core.contracts.transport import GraphQLExecutor
from ghprojects.core.github.mapper import dig
from ghprojects.core.github.queries import ADD_PROJECT_ITEM, ISSUE_OR_PULL_REQUEST_ID, UPDATE_ITEM_FIELD_VALUE

_LOG = logging.getLogger(__name__)


class ItemPipeline:
    """Runs the three remote stages of adding one issue or pull request to a project.

    Stages are strictly ordered for a single item; the pipeline holds no
    per-item state so one instance is shared by every worker.
    """

    def __init__(self, client: GraphQLExecutor, repo: Repository, project_id: str) -> None:
        self._client = client
        self._repo = repo
        self._project_id = project_id

    async def resolve_reference(self, number: int) -> str:
        """Return the content id of issue or pull request *number*.

        Raises:
            ItemNotFoundError: The repository has no issue or pull request with that number.
        """
        variables = {"owner": self._repo.owner, "name": self._repo.name, "number": number}
        try:
            data = await self._client.execute(ISSUE_OR_PULL_REQUEST_ID, variables)
        except GraphQLError as exc:
            if exc.has_code("NOT_FOUND"):
                raise ItemNotFoundError(str(exc), number=number) from exc
            raise

        node = dig(data, "repository").get("issueOrPullRequest")
        if not isinstance(node, dict) or not node.get("id"):
            raise ItemNotFoundError(
                f"Could not resolve to an issue or pull request with the number of {number}.",
                number=number,
            )
        return str(node["id"])

    async def attach(self, content_id: str) -> str:
        """Add *content_id* to the project and return the new item id."""
        data = await self._client.execute(ADD_PROJECT_ITEM, {"id": self._project_id, "contentId": content_id})
        item = dig(data, "addProjectV2ItemById", "item")
        item_id = item.get("id")
        if not item_id:
            raise ProviderError(f"addProjectV2ItemById returned no item for {content_id}")
        return str(item_id)

    async def apply_fields(self, item_id: str, fields: Mapping[str, ResolvedField]) -> None:
        # No ordering guarantee across fields; the first failure stops the rest.
        for name, resolved in fields.items():
            variables = {
                "projectId": self._project_id,
                "itemId": item_id,
                "fieldId": resolved.field.id,
                "value": resolved.value.to_graphql(),
            }
            try:
                await self._client.execute(UPDATE_ITEM_FIELD_VALUE, variables)
            except ProviderError as exc:
                raise FieldUpdateError(f'failed to update field "{name}": {exc}', field_name=name) from exc

    async def run(self, unit: WorkUnit, fields: Mapping[str, ResolvedField]) -> WorkUnit:
        """Drive *unit* through every stage, marking it failed on the first error."""
        try:
            unit.content_id = await self.resolve_reference(unit.number)
            unit.advance(WorkUnitState.REFERENCE_RESOLVED)
            unit.item_id = await self.attach(unit.content_id)
            unit.advance(WorkUnitState.ATTACHED)
            if fields:
                await self.apply_fields(unit.item_id, fields)
            unit.advance(WorkUnitState.FIELDS_APPLIED)
        except Exception as exc:
            _LOG.debug("#%d failed after %s: %s", unit.number, unit.state, exc)
            unit.fail(exc)
            raise
        _LOG.debug("#%d added as %s", unit.number, unit.item_id)
        return unit
