"""SDK composition root for ghprojects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ghprojects.core.auth import TokenResolver, create_token_resolver
from ghprojects.core.contracts.config import ProjectsConfig
from ghprojects.core.contracts.edit import CloneRequest, CloneResult, EditRequest, EditResult, ProjectState
from ghprojects.core.contracts.project import Project, ProjectList
from ghprojects.core.engine.progress import EditProgress
from ghprojects.core.github import GitHubGraphQLClient
from ghprojects.core.ops import list_projects, run_clone, run_edit, view_project

ClientFactory = Callable[[str, str], Any]


def _default_client_factory(token: str, url: str) -> GitHubGraphQLClient:
    return GitHubGraphQLClient(token=token, url=url)


class GhProjects:
    """ghprojects SDK public API.

    Each operation resolves a token, opens one GraphQL client for the
    repository's host and closes it when the operation returns.
    """

    def __init__(
        self,
        *,
        config: ProjectsConfig,
        token_resolver: TokenResolver,
        progress: EditProgress | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._token_resolver = token_resolver
        self._progress = progress
        self._client_factory = client_factory or _default_client_factory

    @classmethod
    async def from_config(cls, config: ProjectsConfig, *, progress: EditProgress | None = None) -> GhProjects:
        return cls(config=config, token_resolver=create_token_resolver(config), progress=progress)

    @property
    def config(self) -> ProjectsConfig:
        return self._config

    async def _open_client(self) -> Any:
        token = await self._token_resolver.resolve()
        return self._client_factory(token, self._config.repo.graphql_url)

    async def list_projects(self, *, search: str | None = None, state: ProjectState = ProjectState.OPEN) -> ProjectList:
        async with await self._open_client() as client:
            return await list_projects(client, self._config.repo, search=search, state=state)

    async def view_project(self, number: int) -> Project:
        async with await self._open_client() as client:
            return await view_project(client, self._config.repo, number)

    async def clone_project(self, request: CloneRequest) -> CloneResult:
        async with await self._open_client() as client:
            return await run_clone(client, self._config.repo, request, progress=self._progress)

    async def edit_project(self, request: EditRequest) -> EditResult:
        """Update a project, then add and remove items as requested.

        Items added before a failure stay on the project; the first error is re-raised.
        """
        async with await self._open_client() as client:
            return await run_edit(
                client,
                self._config.repo,
                request,
                worker_count=self._config.worker_count,
                progress=self._progress,
            )
