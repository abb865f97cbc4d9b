"""Token resolver factory."""

from __future__ import annotations

from ghprojects.core.auth.base import TokenResolver
from ghprojects.core.auth.resolvers.env import EnvTokenResolver
from ghprojects.core.auth.resolvers.gh_cli import GhCliTokenResolver
from ghprojects.core.auth.resolvers.static import StaticTokenResolver
from ghprojects.core.contracts.config import ProjectsConfig
from ghprojects.core.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "gh-cli": GhCliTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: ProjectsConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "gh-cli":
        return GhCliTokenResolver(hostname=config.repo.host)
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
