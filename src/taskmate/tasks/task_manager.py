# src/taskmate/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import TaskPresenter
from ..core.ui import ConsoleUI
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskIndexError(IndexError):
    """A 1-based task index fell outside [1, count]."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        noun = "task" if count == 1 else "tasks"
        super().__init__(
            f"I'm sorry but that task does not exist. There are only {count} {noun}."
        )


class TaskManager:
    """
    Ordered task list with 1-based, index-addressed operations.

    Invariants:
    - num_of_tasks always equals the length of the underlying list
    - index checks happen before any mutation, so a rejected call leaves
      the list untouched
    - user-visible strings are produced by the injected presenter only
    """

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        *,
        ui: TaskPresenter | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []
        self._ui: TaskPresenter = ui if ui is not None else ConsoleUI()
        logger.debug("TaskManager ready count=%s", self.num_of_tasks)

    @property
    def num_of_tasks(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _resolve(self, index: int) -> int:
        """Translate a 1-based user index to a 0-based list position."""
        count = self.num_of_tasks
        if index < 1 or index > count:
            logger.debug("Index out of range index=%s count=%s", index, count)
            raise TaskIndexError(index, count)
        return index - 1

    # ---- public API ----

    def add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s count=%s", task.kind.value, self.num_of_tasks)
        return self._ui.add_task(task.get_name(), self.num_of_tasks)

    def list_tasks(self) -> str:
        return self._ui.display_list(self._tasks, self.num_of_tasks)

    def mark(self, index: int) -> str:
        task = self._tasks[self._resolve(index)]
        task.mark()
        logger.debug("Task marked index=%s", index)
        return self._ui.mark_task(task.get_name())

    def unmark(self, index: int) -> str:
        task = self._tasks[self._resolve(index)]
        task.unmark()
        logger.debug("Task unmarked index=%s", index)
        return self._ui.unmark_task(task.get_name())

    def delete(self, index: int) -> str:
        removed = self._tasks.pop(self._resolve(index))
        logger.debug("Task deleted index=%s count=%s", index, self.num_of_tasks)
        return self._ui.delete_task(removed.get_name(), self.num_of_tasks)

    def get_description(self, index: int) -> str:
        task = self._tasks[self._resolve(index)]
        return self._ui.get_description(task.get_note())

    def add_note(self, index: int, note: str) -> str:
        task = self._tasks[self._resolve(index)]
        task.add_note(note)
        logger.debug("Note set index=%s len=%s", index, len(note))
        return self._ui.add_note(index, task.get_name())

    def filter_list(self, keyword: str) -> list[Task]:
        """
        Tasks whose rendered form contains `keyword` (case-sensitive, literal),
        in their original order. Always a new list.
        """
        return [task for task in self._tasks if keyword in task.render()]

    def find(self, keyword: str) -> str:
        return self._ui.display_found(self.filter_list(keyword))

    def get_list(self) -> tuple[Task, ...]:
        """
        Snapshot of the current sequence (used by persistence on save).

        The tuple itself cannot be used to reorder or resize the list; the
        Task objects inside are the live ones.
        """
        return tuple(self._tasks)
