"""Thin REST client for the remote notes collection.

Talks to a PostgREST endpoint (Supabase ``rest/v1``). Listing raises
``RemoteStoreError`` on a non-success status; create/update/delete return
whether the status was in the 2xx range. Transport errors propagate as
``httpx.TransportError``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional
from uuid import uuid4

import httpx
from pydantic import ValidationError

from notes_client.config import Settings
from notes_client.metrics import REMOTE_DURATION, REMOTE_REQUESTS
from notes_client.models import Note, NotePatch, from_record, utc_timestamp

logger = logging.getLogger(__name__)


class RemoteStoreError(Exception):
    """The remote store answered with a non-success status."""

    def __init__(self, operation: str, status_code: int) -> None:
        super().__init__(f"{operation} failed with HTTP {status_code}")
        self.operation = operation
        self.status_code = status_code


def is_success(status_code: int) -> bool:
    """Whether *status_code* is in the 200-299 range."""
    return 200 <= status_code <= 299


class NotesRepository:
    """Create, read, update and delete notes against one REST collection."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.settings.supabase_key,
            "Authorization": f"Bearer {self.settings.bearer_token}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        operation: str,
        method: str,
        *,
        params: Optional[dict[str, str]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request and record its outcome."""
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                transport=self._transport,
            ) as client:
                resp = await client.request(
                    method,
                    self.settings.collection_url,
                    headers=self._headers(),
                    params=params,
                    json=json,
                )
        except httpx.TransportError as e:
            REMOTE_REQUESTS.labels(operation=operation, status="transport_error").inc()
            logger.error("%s %s failed: %s", method, operation, e)
            raise
        finally:
            REMOTE_DURATION.labels(operation=operation).observe(
                time.perf_counter() - start
            )

        REMOTE_REQUESTS.labels(operation=operation, status=str(resp.status_code)).inc()
        if is_success(resp.status_code):
            logger.debug("%s %s -> %d", method, operation, resp.status_code)
        else:
            logger.warning(
                "%s %s -> %d: %s", method, operation, resp.status_code, resp.text[:200]
            )
        return resp

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def fetch_all(self) -> list[Note]:
        """GET the whole collection, decoded into notes."""
        resp = await self._request("fetch_all", "GET", params={"select": "*"})
        if not is_success(resp.status_code):
            raise RemoteStoreError("fetch_all", resp.status_code)
        if not resp.content:
            return []
        try:
            notes = [from_record(record) for record in resp.json()]
        except ValidationError as e:
            logger.error("Malformed note row in %s: %s", self.settings.notes_table, e)
            raise
        logger.info("Fetched %d notes", len(notes))
        return notes

    async def create(self, title: str, content: str) -> bool:
        """POST a new note with a fresh id and the current timestamp."""
        note = Note(
            id=str(uuid4()), title=title, content=content, updated_at=utc_timestamp()
        )
        resp = await self._request("create", "POST", json=note.model_dump())
        if is_success(resp.status_code):
            logger.info("Created note %s", note.id)
        return is_success(resp.status_code)

    async def update(self, note_id: str, title: str, content: str) -> bool:
        """PATCH title, content and timestamp of the note with *note_id*."""
        patch = NotePatch(title=title, content=content)
        resp = await self._request(
            "update",
            "PATCH",
            params={"id": f"eq.{note_id}"},
            json=patch.model_dump(),
        )
        return is_success(resp.status_code)

    async def delete(self, note_id: str) -> bool:
        """DELETE the note with *note_id*."""
        resp = await self._request("delete", "DELETE", params={"id": f"eq.{note_id}"})
        return is_success(resp.status_code)
