"""Streamlit front end for the notes client.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Coroutine
from pathlib import Path
from typing import Any

# Ensure the project root is on sys.path so `ui.*` imports resolve
# regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from notes_client.config import Settings  # noqa: E402
from notes_client.controller import NotesController  # noqa: E402
from notes_client.metrics import serve_metrics  # noqa: E402
from ui.components import editor, notes_list  # noqa: E402

st.set_page_config(page_title="Notes", page_icon="📝", layout="centered")


@st.cache_resource
def _settings() -> Settings:
    """Process-wide setup: settings, logging and the metrics exporter."""
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )
    try:
        serve_metrics(settings.metrics_port)
    except OSError as e:
        logging.getLogger(__name__).warning(
            "Metrics endpoint unavailable on port %d: %s", settings.metrics_port, e
        )
    return settings


def _run(coro: Coroutine[Any, Any, None]) -> None:
    """Drive a controller coroutine to completion from the script thread."""
    asyncio.run(coro)


def _ensure_controller() -> NotesController:
    """One controller per browser session; loads notes on first use."""
    if "controller" not in st.session_state:
        controller = NotesController.from_settings(_settings())
        st.session_state.controller = controller
        _run(controller.load_notes())
    return st.session_state.controller


controller = _ensure_controller()
state = controller.state

if state.is_editor_open:
    editor.render(controller, _run)
else:
    notes_list.render(controller, _run)

if state.error_message:
    col_msg, col_close = st.columns([5, 1])
    col_msg.error(state.error_message)
    if col_close.button("Close", key="dismiss_error"):
        controller.dismiss_error()
        st.rerun()
