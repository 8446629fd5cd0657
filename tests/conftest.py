# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.core.ui import ConsoleUI
from taskmate.tasks.task_manager import TaskManager
from taskmate.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskmate-test",
        log_level="WARNING",
        log_to_file=False,
        autosave=True,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with an in-memory repo so tests can inspect saves directly.
    """
    ui = ConsoleUI()
    return AppState(
        settings=settings,
        ui=ui,
        manager=TaskManager(ui=ui),
        store=FakeTaskRepo(),
    )


@pytest.fixture()
def file_store(settings: SimpleNamespace) -> TaskStore:
    """Real JSON store under tmp_path."""
    return TaskStore(settings.tasks_path)
