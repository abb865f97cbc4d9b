"""httpx async transport wrapper with retry, backoff, and rate-limit handling."""

from __future__ import annotations

import asyncio
import logging
import random
import time

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})
_MAX_BACKOFF_SECONDS = 4.0


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with automatic retry on transient failures.

    - Exponential backoff + jitter, up to *max_retries* extra attempts
    - HTTP 429 pauses **all** concurrent requests through a shared event,
      honouring ``Retry-After`` (worker tasks share one client)
    - 502 / 503 / 504 and transport-level errors are retried

    Anything else is returned to the caller untouched; the engine never retries.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries

        self._pause_lock = asyncio.Lock()
        self._unpaused = asyncio.Event()
        self._unpaused.set()
        self._paused_until = 0.0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            await self._unpaused.wait()
            exhausted = attempt >= self._max_retries

            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if exhausted:
                    raise
                _LOG.debug("Transport error for %s %s: %s", request.method, request.url, exc)
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or exhausted:
                if response.status_code == 429:
                    await self._pause(self._parse_retry_after(response))
                return response

            await response.aread()
            retry_after = self._parse_retry_after(response)
            if response.status_code == 429:
                await self._pause(retry_after)
            elif retry_after > 0:
                await asyncio.sleep(retry_after)
            await self._sleep_backoff(attempt)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    # ------------------------------------------------------------------
    # Rate-limit helpers
    # ------------------------------------------------------------------

    async def _pause(self, retry_after: float) -> None:
        now = time.monotonic()
        async with self._pause_lock:
            until = now + max(0.0, retry_after)
            if until <= self._paused_until:
                return
            self._paused_until = until
            self._unpaused.clear()

        _LOG.warning("GitHub rate limit hit; pausing requests for %.1fs", retry_after)
        await asyncio.sleep(max(0.0, self._paused_until - time.monotonic()))

        async with self._pause_lock:
            if time.monotonic() >= self._paused_until:
                self._unpaused.set()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 1.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 1.0

    @staticmethod
    async def _sleep_backoff(attempt: int) -> None:
        seconds = min(_MAX_BACKOFF_SECONDS, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying GitHub request (attempt %d)", attempt + 1)
        await asyncio.sleep(seconds)
