# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, presenter and task manager into AppState,
- saves the task list on shutdown.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.ui import ConsoleUI
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings, seeding the manager from disk.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    ui = ConsoleUI()
    manager = TaskManager(store.load(), ui=ui)

    return AppState(settings=settings, ui=ui, manager=manager, store=store)


def save_tasks(state: AppState) -> None:
    try:
        state.save()
        logger.info("Saved %d tasks", state.manager.num_of_tasks)
    except OSError:
        logger.exception("Failed to save tasks.")
