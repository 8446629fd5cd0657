# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task manager depends on Protocols instead of concrete implementations.
This keeps the presenter and the storage backend swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskPresenter(Protocol):
    """Turns structured data from the manager into user-facing strings."""

    def greet(self, app_name: str) -> str: ...
    def goodbye(self) -> str: ...

    def add_task(self, task_name: str, count: int) -> str: ...
    def display_list(self, tasks: Sequence[Task], count: int) -> str: ...
    def mark_task(self, task_name: str) -> str: ...
    def unmark_task(self, task_name: str) -> str: ...
    def delete_task(self, task_name: str, count: int) -> str: ...
    def get_description(self, note: str) -> str: ...
    def add_note(self, index: int, task_name: str) -> str: ...
    def display_found(self, tasks: Sequence[Task]) -> str: ...
    def show_error(self, message: str) -> str: ...


class TaskRepo(Protocol):
    """
    Persistence side of the task list.

    The core never defines the on-disk format; it only hands over an ordered
    sequence of tasks on save and receives one back on load.
    """

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...
