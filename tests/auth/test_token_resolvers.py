from __future__ import annotations

from typing import Any

import pytest

from ghprojects.core.auth.resolvers.env import EnvTokenResolver
from ghprojects.core.auth.resolvers.gh_cli import GhCliTokenResolver
from ghprojects.core.auth.resolvers.static import StaticTokenResolver
from ghprojects.core.contracts.exceptions import AuthenticationError


class _MockProcess:
    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr


@pytest.mark.asyncio
async def test_env_token_resolver_prefers_gh_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_TOKEN", "gh_tok")
    monkeypatch.setenv("GITHUB_TOKEN", "github_tok")

    assert await EnvTokenResolver().resolve() == "gh_tok"


@pytest.mark.asyncio
async def test_env_token_resolver_falls_back_to_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_TOKEN", "   ")
    monkeypatch.setenv("GITHUB_TOKEN", "github_tok")

    assert await EnvTokenResolver().resolve() == "github_tok"


@pytest.mark.asyncio
async def test_env_token_resolver_raises_with_login_hint() -> None:
    with pytest.raises(AuthenticationError, match="gh auth login -s project"):
        await EnvTokenResolver().resolve()


@pytest.mark.asyncio
async def test_static_token_resolver() -> None:
    assert await StaticTokenResolver(token=" tok ").resolve() == "tok"
    with pytest.raises(AuthenticationError):
        await StaticTokenResolver(token="").resolve()


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_returns_token(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        assert args == ("gh", "auth", "token", "--hostname", "github.example.com")
        return _MockProcess(returncode=0, stdout=b"tok_123\n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GhCliTokenResolver(hostname="github.example.com").resolve() == "tok_123"


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_not_logged_in(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=1, stderr=b"no oauth token")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match=r"not logged in to github\.com; use `gh auth login -s project`"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_raises_when_subprocess_cannot_start(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise OSError("gh missing")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="Failed to execute gh CLI"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_raises_on_empty_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=0, stdout=b"  \n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="empty token"):
        await GhCliTokenResolver().resolve()
