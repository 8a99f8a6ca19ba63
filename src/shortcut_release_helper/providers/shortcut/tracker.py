"""Shortcut issue-tracker adapter over the v3 REST API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Literal

import httpx
from pydantic import ValidationError

from shortcut_release_helper.contracts.config import DEFAULT_API_URL
from shortcut_release_helper.contracts.exceptions import AuthenticationError, EntityNotFoundError, ProviderError
from shortcut_release_helper.contracts.provider import IssueTracker
from shortcut_release_helper.contracts.tracker import Epic, EpicId, Story, StoryId
from shortcut_release_helper.providers.shortcut._retrying_transport import RetryingTransport
from shortcut_release_helper.providers.shortcut.models import ShortcutEpicPayload, ShortcutStoryPayload

_LOG = logging.getLogger(__name__)


class ShortcutTracker(IssueTracker):
    """Read-only Shortcut client.

    Use as an async context manager; the HTTP client is opened on enter and
    closed on exit::

        async with ShortcutTracker(token=token) as tracker:
            story = await tracker.get_story(101)
    """

    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_API_URL,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> ShortcutTracker:
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            transport=RetryingTransport(transport=self._transport, max_retries=self._max_retries),
            headers={
                "Shortcut-Token": self._token,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            timeout=httpx.Timeout(30.0),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_story(self, story_id: StoryId) -> Story:
        payload = await self._get_entity("story", f"/stories/{story_id}", story_id)
        try:
            return ShortcutStoryPayload.model_validate(payload).to_story()
        except ValidationError as exc:
            raise ProviderError(f"Malformed story {story_id} payload: {exc}") from exc

    async def get_epic(self, epic_id: EpicId) -> Epic:
        payload = await self._get_entity("epic", f"/epics/{epic_id}", epic_id)
        try:
            return ShortcutEpicPayload.model_validate(payload).to_epic()
        except ValidationError as exc:
            raise ProviderError(f"Malformed epic {epic_id} payload: {exc}") from exc

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise ProviderError("Tracker is not initialized. Use 'async with'.")
        return self._client

    async def _get_entity(self, kind: Literal["story", "epic"], path: str, entity_id: int) -> Any:
        client = self._require_client()
        _LOG.debug("Fetching %s %d", kind, entity_id)
        try:
            response = await client.get(path)
        except httpx.HTTPError as exc:
            raise ProviderError(f"Request for {kind} {entity_id} failed: {exc}") from exc

        status = response.status_code
        if status in (401, 403):
            raise AuthenticationError(
                f"Shortcut rejected the API token (HTTP {status}) while fetching {kind} {entity_id}. "
                "Check SHORTCUT_TOKEN."
            )
        if status == 404:
            raise EntityNotFoundError(f"{kind.capitalize()} {entity_id} not found", kind=kind, entity_id=entity_id)
        if status >= 400:
            raise ProviderError(f"Fetching {kind} {entity_id} failed with HTTP {status}: {response.text[:200]}")
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(f"Invalid JSON for {kind} {entity_id}") from exc
