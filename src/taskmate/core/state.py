# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_manager import TaskManager
from .ports import TaskPresenter, TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them (autosave, app_name).
    settings: object

    ui: TaskPresenter
    manager: TaskManager
    store: TaskRepo

    def save(self) -> None:
        self.store.save(self.manager.get_list())
