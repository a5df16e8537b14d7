"""View-model for the notes UI.

Holds the UI-facing state as an immutable snapshot and sequences repository
calls. Every change is published to subscribed listeners; the presentation
layer renders from the latest snapshot and never mutates it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

import httpx

from notes_client.config import Settings
from notes_client.metrics import NOTES_LOADED
from notes_client.models import Note, sort_notes
from notes_client.repository import NotesRepository

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load notes"
SAVE_FAILED = "Failed to save note"
DELETE_FAILED = "Failed to delete note"
EMPTY_TITLE = "Title cannot be empty"


@dataclass(frozen=True)
class EditorSession:
    """An open editor: the note being edited (None when creating) and its buffers."""

    note: Optional[Note] = None
    title: str = ""
    content: str = ""

    @property
    def is_new(self) -> bool:
        return self.note is None

    @classmethod
    def for_note(cls, note: Optional[Note]) -> EditorSession:
        if note is None:
            return cls()
        return cls(note=note, title=note.title, content=note.content)


@dataclass(frozen=True)
class NotesState:
    """Snapshot of everything the presentation layer renders."""

    notes: tuple[Note, ...] = ()
    is_loading: bool = False
    error_message: Optional[str] = None
    editor: Optional[EditorSession] = None

    @property
    def is_editor_open(self) -> bool:
        return self.editor is not None


Listener = Callable[[NotesState], None]


class NotesController:
    """Orchestrates repository calls and exposes the resulting state."""

    def __init__(self, repository: NotesRepository) -> None:
        self.repository = repository
        self._state = NotesState()
        self._listeners: list[Listener] = []

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> NotesController:
        """Build a controller with its own repository."""
        return cls(NotesRepository(settings, transport=transport))

    @property
    def state(self) -> NotesState:
        """The current state snapshot."""
        return self._state

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with every new snapshot. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener failed")

    # ------------------------------------------------------------------
    # Editor session
    # ------------------------------------------------------------------

    def open_editor(self, note: Optional[Note] = None) -> None:
        """Open the editor on *note*, or on a blank note when None."""
        self._set(editor=EditorSession.for_note(note))

    def close_editor(self) -> None:
        """Close the editor, discarding unsaved buffers."""
        self._set(editor=None)

    def set_editor_title(self, text: str) -> None:
        if self._state.editor is None:
            return
        self._set(editor=replace(self._state.editor, title=text))

    def set_editor_content(self, text: str) -> None:
        if self._state.editor is None:
            return
        self._set(editor=replace(self._state.editor, content=text))

    def dismiss_error(self) -> None:
        self._set(error_message=None)

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    async def load_notes(self) -> None:
        """Fetch the collection and replace the list, newest first.

        On failure the previous list is kept and the load error is shown.
        """
        self._set(is_loading=True, error_message=None)
        try:
            await self._refresh()
        finally:
            self._set(is_loading=False)

    async def _refresh(self) -> None:
        """Reload the list without touching the loading flag."""
        try:
            notes = sort_notes(await self.repository.fetch_all())
        except Exception:
            logger.exception("Loading notes failed")
            self._set(error_message=LOAD_FAILED)
            return
        self._set(notes=tuple(notes))
        NOTES_LOADED.set(len(notes))

    async def save_note(self) -> None:
        """Create or update the note in the editor, then close and reload.

        An empty title (after trimming) is rejected without a request.
        """
        editor = self._state.editor
        if editor is None:
            logger.warning("save_note called with no open editor")
            return

        title = editor.title.strip()
        content = editor.content.strip()
        if not title:
            self._set(error_message=EMPTY_TITLE)
            return

        self._set(is_loading=True, error_message=None)
        try:
            try:
                if editor.note is None:
                    ok = await self.repository.create(title, content)
                else:
                    ok = await self.repository.update(editor.note.id, title, content)
            except Exception:
                logger.exception("Saving note failed")
                ok = False

            if ok:
                self.close_editor()
                await self._refresh()
            else:
                self._set(error_message=SAVE_FAILED)
        finally:
            self._set(is_loading=False)

    async def delete_current_note(self) -> None:
        """Delete the note open in the editor, then close and reload."""
        editor = self._state.editor
        if editor is None or editor.note is None:
            return

        self._set(is_loading=True, error_message=None)
        try:
            try:
                ok = await self.repository.delete(editor.note.id)
            except Exception:
                logger.exception("Deleting note %s failed", editor.note.id)
                ok = False

            if ok:
                self.close_editor()
                await self._refresh()
            else:
                self._set(error_message=DELETE_FAILED)
        finally:
            self._set(is_loading=False)
