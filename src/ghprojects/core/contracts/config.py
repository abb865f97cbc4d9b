"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

DEFAULT_HOST = "github.com"
DEFAULT_WORKER_COUNT = 5


class Repository(BaseModel):
    model_config = {"frozen": True}

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)
    host: str = DEFAULT_HOST

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def graphql_url(self) -> str:
        if self.host == DEFAULT_HOST:
            return "https://api.github.com/graphql"
        return f"https://{self.host}/api/graphql"

    def __str__(self) -> str:
        return self.full_name


class ProjectsConfig(BaseModel):
    repo: Repository
    auth: str = "gh-cli"
    token: str | None = None
    worker_count: int = Field(default=DEFAULT_WORKER_COUNT, ge=1, le=20)
    verbose: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> ProjectsConfig:
        token = (self.token or "").strip()
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        if self.auth == "token" and not token:
            raise ValueError("token auth requires a non-empty token")
        if self.auth != "token" and token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self
