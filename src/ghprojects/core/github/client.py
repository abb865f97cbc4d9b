"""Async GitHub GraphQL client."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from ghprojects.core.contracts.exceptions import AuthenticationError, GraphQLError, ProviderError
from ghprojects.core.github._retrying_transport import RetryingTransport

_LOG = logging.getLogger(__name__)

_OPERATION_RE = re.compile(r"^\s*(?:query|mutation)\s+(\w+)")


def operation_name(query: str) -> str:
    """Return the declared operation name of *query*, or ``"anonymous"``."""
    match = _OPERATION_RE.match(query)
    return match.group(1) if match else "anonymous"


class GitHubGraphQLClient:
    """Executes GraphQL operations against one GitHub host.

    Use as an async context manager so the underlying connection pool is closed::

        async with GitHubGraphQLClient(token=token, url=repo.graphql_url) as client:
            data = await client.execute(query, {"owner": "octo"})
    """

    def __init__(
        self,
        *,
        token: str,
        url: str = "https://api.github.com/graphql",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._url = url
        self._http = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": "ghprojects",
            },
            transport=transport or RetryingTransport(),
            timeout=httpx.Timeout(timeout),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )

    async def __aenter__(self) -> GitHubGraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def execute(self, query: str, variables: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Run *query* with *variables* and return its ``data`` payload.

        Raises:
            AuthenticationError: The host rejected the token.
            GraphQLError: The response carried GraphQL ``errors``.
            ProviderError: Any other HTTP or payload failure.
        """
        name = operation_name(query)
        _LOG.debug("GraphQL %s %s", name, dict(variables or {}))

        try:
            response = await self._http.post(self._url, json={"query": query, "variables": dict(variables or {})})
        except httpx.HTTPError as exc:
            raise ProviderError(f"{name} request failed: {exc}") from exc

        if response.status_code == 401:
            raise AuthenticationError(f"GitHub rejected the token for {response.request.url.host} (HTTP 401)")
        if response.is_error:
            raise ProviderError(f"{name} failed: HTTP {response.status_code} from {self._url}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(f"{name} returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise ProviderError(f"{name} returned an unexpected payload")

        data = payload.get("data")
        errors = payload.get("errors") or []
        if errors:
            raise GraphQLError(errors, data=data if isinstance(data, dict) else None)
        if not isinstance(data, dict):
            raise ProviderError(f"{name} response missing data payload")
        return data
