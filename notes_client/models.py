"""Pydantic models for notes stored in the remote collection."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(UTC).isoformat()


class Note(BaseModel):
    """A single note as stored remotely."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = Field(default="", description="Note title")
    content: str = Field(default="", description="Note content")
    updated_at: str = Field(
        default_factory=utc_timestamp,
        description="Last update timestamp",
    )

    @field_validator("title", "content", "updated_at", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def updated_datetime(self) -> datetime | None:
        """``updated_at`` parsed as an aware datetime, or None if unparseable."""
        try:
            parsed = datetime.fromisoformat(self.updated_at)
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed


class NotePatch(BaseModel):
    """Body of a partial update."""

    title: str
    content: str
    updated_at: str = Field(default_factory=utc_timestamp)


_OLDEST = datetime.min.replace(tzinfo=UTC)


def _sort_key(note: Note) -> tuple[bool, datetime, str]:
    parsed = note.updated_datetime
    return (parsed is not None, parsed or _OLDEST, note.updated_at)


def sort_notes(notes: Iterable[Note]) -> list[Note]:
    """Return notes newest first.

    Parseable timestamps are compared as instants; anything else sorts last.
    """
    return sorted(notes, key=_sort_key, reverse=True)


class NoteRecord(BaseModel):
    """One row as returned by the remote collection.

    ``id``, ``title`` and ``content`` must be present; only ``updated_at`` may
    be missing.
    """

    id: str
    title: str
    content: str
    updated_at: str = ""

    @field_validator("title", "content", "updated_at", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_note(self) -> Note:
        return Note(**self.model_dump())


def from_record(record: dict) -> Note:
    """Decode one remote row. Raises ``pydantic.ValidationError`` on a malformed row."""
    return NoteRecord.model_validate(record).to_note()
