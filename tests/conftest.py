"""Shared fixtures: an in-memory PostgREST notes table behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import pytest

from notes_client.config import Settings
from notes_client.controller import NotesController
from notes_client.repository import NotesRepository

BASE_URL = "https://project.supabase.co"
API_KEY = "test-api-key"


class FakeNotesTable:
    """Answers GET/POST/PATCH/DELETE like a PostgREST table keyed by ``id``."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.fail_status: Optional[int] = None

    def seed(self, *rows: dict[str, Any]) -> None:
        for row in rows:
            self.rows[row["id"]] = dict(row)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"message": "server error"})

        target = request.url.params.get("id", "").removeprefix("eq.")

        if request.method == "GET":
            return httpx.Response(200, json=list(self.rows.values()))
        if request.method == "POST":
            body = json.loads(request.content)
            if body["id"] in self.rows:
                return httpx.Response(409, json={"message": "duplicate key"})
            self.rows[body["id"]] = body
            return httpx.Response(201)
        if request.method == "PATCH":
            if target in self.rows:
                self.rows[target].update(json.loads(request.content))
            return httpx.Response(204)
        if request.method == "DELETE":
            self.rows.pop(target, None)
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture()
def settings() -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(
        _env_file=None,
        supabase_url=BASE_URL,
        supabase_key=API_KEY,
        supabase_bearer="",
        notes_table="notes",
    )


@pytest.fixture()
def table() -> FakeNotesTable:
    return FakeNotesTable()


@pytest.fixture()
def repository(settings: Settings, table: FakeNotesTable) -> NotesRepository:
    return NotesRepository(settings, transport=httpx.MockTransport(table.handler))


@pytest.fixture()
def controller(repository: NotesRepository) -> NotesController:
    return NotesController(repository)
