from __future__ import annotations

from typing import Any

import pytest

from ghprojects import (
    AuthenticationError,
    EditRequest,
    GhProjects,
    ProjectChanges,
    ProjectsConfig,
    Repository,
)
from ghprojects.core.auth.resolvers.gh_cli import GhCliTokenResolver
from ghprojects.core.auth.resolvers.static import StaticTokenResolver
from tests.fakes.client import FakeGraphQLClient, connection


def _config(**overrides: Any) -> ProjectsConfig:
    values: dict[str, Any] = {"repo": Repository(owner="heaths", name="gh-projects")}
    values.update(overrides)
    return ProjectsConfig(**values)


class _Factory:
    def __init__(self, client: FakeGraphQLClient) -> None:
        self.client = client
        self.opened: list[tuple[str, str]] = []

    def __call__(self, token: str, url: str) -> FakeGraphQLClient:
        self.opened.append((token, url))
        return self.client


@pytest.mark.asyncio
async def test_list_projects_opens_and_closes_client(fake_client: FakeGraphQLClient) -> None:
    fake_client.on("RepositoryProjectsV2", {"repository": {"projectsV2": connection([])}})
    factory = _Factory(fake_client)
    sdk = GhProjects(config=_config(), token_resolver=StaticTokenResolver(" tok "), client_factory=factory)

    result = await sdk.list_projects(search="roadmap")

    assert result.projects == []
    assert factory.opened == [("tok", "https://api.github.com/graphql")]
    assert fake_client.closed is True


@pytest.mark.asyncio
async def test_enterprise_host_uses_enterprise_endpoint(fake_client: FakeGraphQLClient) -> None:
    fake_client.on(
        "RepositoryProjectV2",
        {"repository": {"projectV2": {"id": "PVT_1", "number": 1, "title": "Roadmap"}}},
    )
    factory = _Factory(fake_client)
    config = _config(repo=Repository(owner="octo", name="app", host="ghe.example.com"))
    sdk = GhProjects(config=config, token_resolver=StaticTokenResolver("tok"), client_factory=factory)

    project = await sdk.view_project(1)

    assert project.title == "Roadmap"
    assert factory.opened == [("tok", "https://ghe.example.com/api/graphql")]


@pytest.mark.asyncio
async def test_edit_project_updates_scalars(fake_client: FakeGraphQLClient) -> None:
    fake_client.on(
        "RepositoryProjectV2ID",
        {
            "repository": {
                "projectV2": {"id": "PVT_1", "url": "https://github.com/users/heaths/projects/1", "public": True}
            },
            "viewer": {"id": "U_1"},
        },
    ).on("UpdateProjectV2", {"updateProjectV2": {"projectV2": {"id": "PVT_1"}}})
    sdk = GhProjects(
        config=_config(),
        token_resolver=StaticTokenResolver("tok"),
        client_factory=_Factory(fake_client),
    )

    result = await sdk.edit_project(EditRequest(number=1, changes=ProjectChanges(title="Renamed")))

    assert result.project_url == "https://github.com/users/heaths/projects/1"
    assert fake_client.calls_to("UpdateProjectV2")[0]["title"] == "Renamed"
    assert fake_client.closed is True


@pytest.mark.asyncio
async def test_token_failure_opens_no_client(fake_client: FakeGraphQLClient) -> None:
    factory = _Factory(fake_client)
    sdk = GhProjects(config=_config(), token_resolver=StaticTokenResolver("  "), client_factory=factory)

    with pytest.raises(AuthenticationError):
        await sdk.list_projects()

    assert factory.opened == []


@pytest.mark.asyncio
async def test_from_config_uses_configured_resolver() -> None:
    config = _config()

    sdk = await GhProjects.from_config(config)

    assert sdk.config is config
    assert isinstance(sdk._token_resolver, GhCliTokenResolver)
    assert sdk._token_resolver.hostname == "github.com"
