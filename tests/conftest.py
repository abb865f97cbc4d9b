"""Shared test fixtures for ghprojects tests."""

from __future__ import annotations

import pytest

from ghprojects.core.contracts.config import Repository
from tests.fakes.client import FakeGraphQLClient


@pytest.fixture
def repo() -> Repository:
    return Repository(owner="heaths", name="gh-projects")


@pytest.fixture
def fake_client() -> FakeGraphQLClient:
    return FakeGraphQLClient()


@pytest.fixture(autouse=True)
def _clean_github_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's GitHub environment out of config and auth tests."""
    for name in ("GH_REPO", "GH_HOST", "GH_TOKEN", "GITHUB_TOKEN", "GHPROJECTS_AUTH"):
        monkeypatch.delenv(name, raising=False)
