"""httpx async transport wrapper with bounded retry and shared rate-limit pauses."""

from __future__ import annotations

import asyncio
import logging
import random
import time

import httpx

_LOG = logging.getLogger(__name__)

# Transient statuses worth another attempt. Shortcut answers 429 once the
# per-token request budget is spent.
_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})
_IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class RetryingTransport(httpx.AsyncBaseTransport):
    """Retries idempotent requests on transient failures.

    - exponential backoff with jitter, capped at *max_backoff* seconds
    - on 429 every in-flight request waits for the same pause, taken from
      ``Retry-After`` when present
    - transport-level errors (connection reset, timeouts) are retried too

    The last response or error is handed back unchanged once *max_retries*
    is exhausted, so callers still see the real status.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
        max_backoff: float = 8.0,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._max_backoff = max_backoff

        self._pause_lock = asyncio.Lock()
        self._not_paused = asyncio.Event()
        self._not_paused.set()
        self._paused_until = 0.0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        retries = self._max_retries if request.method in _IDEMPOTENT_METHODS else 0
        attempt = 0
        while True:
            await self._not_paused.wait()
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= retries:
                    raise
                _LOG.warning("%s %s failed (%s), retrying", request.method, request.url, exc)
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or attempt >= retries:
                return response

            await response.aclose()
            _LOG.warning("%s %s returned %d, retrying", request.method, request.url, response.status_code)
            if response.status_code == 429:
                await self._pause_all(self._retry_after(response))
            await self._sleep_backoff(attempt)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _pause_all(self, seconds: float) -> None:
        async with self._pause_lock:
            until = time.monotonic() + seconds
            if until <= self._paused_until:
                return
            self._paused_until = until
            self._not_paused.clear()

        await asyncio.sleep(max(0.0, self._paused_until - time.monotonic()))

        async with self._pause_lock:
            if time.monotonic() >= self._paused_until:
                self._not_paused.set()

    @staticmethod
    def _retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 1.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 1.0

    async def _sleep_backoff(self, attempt: int) -> None:
        seconds = min(self._max_backoff, float(2**attempt)) + random.uniform(0.0, 0.25)
        await asyncio.sleep(seconds)
