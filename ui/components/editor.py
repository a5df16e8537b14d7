"""Editor page: title and content inputs with save, cancel and delete."""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from notes_client.controller import NotesController


def render(controller: NotesController, run: Callable) -> None:
    """Render the open editor session."""
    session = controller.state.editor
    if session is None:
        return
    busy = controller.state.is_loading
    # Widget keys are scoped to the edited note so switching notes reseeds them.
    scope = session.note.id if session.note else "new"

    st.title("New Note" if session.is_new else "Edit Note")
    title = st.text_input("Title", value=session.title, key=f"title_{scope}")
    content = st.text_area(
        "Note", value=session.content, height=180, key=f"content_{scope}"
    )

    col_delete, col_cancel, col_save = st.columns(3)

    if not session.is_new and col_delete.button(
        "Delete", disabled=busy, use_container_width=True
    ):
        run(controller.delete_current_note())
        st.rerun()

    if col_cancel.button("Cancel", disabled=busy, use_container_width=True):
        controller.close_editor()
        st.rerun()

    if col_save.button("Save", disabled=busy, use_container_width=True, type="primary"):
        controller.set_editor_title(title)
        controller.set_editor_content(content)
        run(controller.save_note())
        st.rerun()
