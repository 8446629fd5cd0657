# tests/test_bootstrap.py

from __future__ import annotations

from datetime import datetime

from taskmate.cli.bootstrap import create_initial_state, save_tasks
from taskmate.tasks.task_models import Task
from taskmate.tasks.task_store import TaskStore


def test_state_is_seeded_from_disk(settings) -> None:
    TaskStore(settings.tasks_path).save(
        [Task.todo("read book", done=True), Task.deadline("submit report", datetime(2024, 12, 1, 23, 59))]
    )

    state = create_initial_state(settings=settings)

    assert state.manager.num_of_tasks == 2
    assert state.manager.get_list()[0].done is True


def test_fresh_state_creates_dirs_and_saves(settings) -> None:
    state = create_initial_state(settings=settings)
    assert settings.data_dir.is_dir()
    assert state.manager.num_of_tasks == 0

    state.manager.add(Task.todo("water plants"))
    save_tasks(state)

    reloaded = create_initial_state(settings=settings)
    assert [t.name for t in reloaded.manager.get_list()] == ["water plants"]
