from __future__ import annotations

import pytest

from ghprojects.core.contracts.config import Repository
from ghprojects.core.contracts.edit import CloneRequest, ProjectChanges
from ghprojects.core.contracts.exceptions import ProjectNotFoundError
from ghprojects.core.ops.clone_ops import run_clone
from tests.fakes.client import FakeGraphQLClient, not_found

SOURCE_URL = "https://github.com/users/heaths/projects/1"
CLONE_URL = "https://github.com/users/heaths/projects/2"


def _client(*, public: bool) -> FakeGraphQLClient:
    return (
        FakeGraphQLClient()
        .on(
            "RepositoryProjectV2ID",
            {
                "viewer": {"id": "U_1"},
                "repository": {"projectV2": {"id": "PVT_1", "url": SOURCE_URL, "public": public}},
            },
        )
        .on("CopyProjectV2", {"copyProjectV2": {"projectV2": {"id": "PVT_2", "url": CLONE_URL}}})
        .on("UpdateProjectV2", {"updateProjectV2": {"projectV2": {"url": CLONE_URL}}})
    )


@pytest.mark.asyncio
async def test_clone_copies_to_viewer_with_new_title(repo: Repository) -> None:
    client = _client(public=False)

    request = CloneRequest(number=1, changes=ProjectChanges(title="Next"), include_drafts=True)

    result = await run_clone(client, repo, request)

    assert client.calls_to("CopyProjectV2") == [
        {"ownerId": "U_1", "projectId": "PVT_1", "title": "Next", "drafts": True}
    ]
    assert result.project_url == CLONE_URL
    assert result.project_id == "PVT_2"
    assert "UpdateProjectV2" not in client.operations


@pytest.mark.asyncio
async def test_clone_inherits_public_visibility(repo: Repository) -> None:
    client = _client(public=True)

    await run_clone(client, repo, CloneRequest(number=1, changes=ProjectChanges(title="Next")))

    assert client.calls_to("UpdateProjectV2") == [{"id": "PVT_2", "title": "Next", "public": True}]


@pytest.mark.asyncio
async def test_clone_visibility_override_wins(repo: Repository) -> None:
    client = _client(public=True)

    await run_clone(client, repo, CloneRequest(number=1, changes=ProjectChanges(title="Next", public=False)))

    assert client.calls_to("UpdateProjectV2") == [{"id": "PVT_2", "title": "Next", "public": False}]


@pytest.mark.asyncio
async def test_clone_applies_description_and_body(repo: Repository) -> None:
    client = _client(public=False)
    changes = ProjectChanges(title="Next", description="Subsequent update", body="Ship it")

    await run_clone(client, repo, CloneRequest(number=1, changes=changes))

    assert client.calls_to("UpdateProjectV2") == [
        {"id": "PVT_2", "title": "Next", "description": "Subsequent update", "body": "Ship it"}
    ]


@pytest.mark.asyncio
async def test_clone_unknown_project(repo: Repository) -> None:
    client = FakeGraphQLClient().on("RepositoryProjectV2ID", not_found("Could not resolve to a ProjectV2"))

    with pytest.raises(ProjectNotFoundError, match='project #3 not found for repository "heaths/gh-projects"'):
        await run_clone(client, repo, CloneRequest(number=3, changes=ProjectChanges(title="Next")))

    assert "CopyProjectV2" not in client.operations
