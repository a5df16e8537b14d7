"""List page: every note as a card, newest first."""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from notes_client.controller import NotesController

_PREVIEW_CHARS = 80


def render(controller: NotesController, run: Callable) -> None:
    """Render the notes list with an add button."""
    state = controller.state
    st.title("My Notes")

    if not state.notes:
        st.caption("No notes found.")

    for note in state.notes:
        with st.container(border=True):
            st.subheader(note.title)
            st.write(note.content[:_PREVIEW_CHARS])
            st.caption(note.updated_at)
            if st.button("Open", key=f"open_{note.id}"):
                controller.open_editor(note)
                st.rerun()

    col_add, col_refresh = st.columns([3, 1])
    if col_add.button("+ Add Note", use_container_width=True, type="primary"):
        controller.open_editor(None)
        st.rerun()
    if col_refresh.button("Refresh", use_container_width=True):
        run(controller.load_notes())
        st.rerun()
