"""GitHub GraphQL transport."""

from ghprojects.core.github._retrying_transport import RetryingTransport
from ghprojects.core.github.client import GitHubGraphQLClient, operation_name
from ghprojects.core.github.pagination import Page, iter_pages

__all__ = ["GitHubGraphQLClient", "Page", "RetryingTransport", "iter_pages", "operation_name"]
