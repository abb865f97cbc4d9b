"""Auth module public exports."""

from ghprojects.core.auth.base import NOT_AUTHENTICATED, TokenResolver
from ghprojects.core.auth.factory import create_token_resolver
from ghprojects.core.auth.resolvers import EnvTokenResolver, GhCliTokenResolver, StaticTokenResolver

__all__ = [
    "NOT_AUTHENTICATED",
    "EnvTokenResolver",
    "GhCliTokenResolver",
    "StaticTokenResolver",
    "TokenResolver",
    "create_token_resolver",
]
