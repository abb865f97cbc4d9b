"""Concrete token resolvers."""

from ghprojects.core.auth.resolvers.env import EnvTokenResolver
from ghprojects.core.auth.resolvers.gh_cli import GhCliTokenResolver
from ghprojects.core.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "GhCliTokenResolver", "StaticTokenResolver"]
