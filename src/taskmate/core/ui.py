# src/taskmate/core/ui.py

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..tasks.task_models import Task


def _plural(count: int) -> str:
    return "task" if count == 1 else "tasks"


class ConsoleUI:
    """
    Plain-text presenter for the console.

    Every method is a pure string builder: the manager hands in names, counts
    and task sequences, and prints nothing itself.
    """

    def greet(self, app_name: str) -> str:
        return f"Hello! I'm {app_name}.\nWhat can I do for you? Type 'help' to list commands."

    def goodbye(self) -> str:
        return "Bye. Hope to see you again soon!"

    def add_task(self, task_name: str, count: int) -> str:
        return (
            "Got it. I've added this task:\n"
            f"  {task_name}\n"
            f"Now you have {count} {_plural(count)} in the list."
        )

    def display_list(self, tasks: Sequence[Task], count: int) -> str:
        if not tasks:
            return "Your list is empty."
        lines = [f"Here are the {count} {_plural(count)} in your list:"]
        for i, task in enumerate(tasks, start=1):
            lines.append(f"{i}.{task.render()}")
        return "\n".join(lines)

    def mark_task(self, task_name: str) -> str:
        return f"Nice! I've marked this task as done:\n  {task_name}"

    def unmark_task(self, task_name: str) -> str:
        return f"OK, I've marked this task as not done yet:\n  {task_name}"

    def delete_task(self, task_name: str, count: int) -> str:
        return (
            "Noted. I've removed this task:\n"
            f"  {task_name}\n"
            f"Now you have {count} {_plural(count)} in the list."
        )

    def get_description(self, note: str) -> str:
        if not note:
            return "This task has no note yet."
        return f"Note:\n  {note}"

    def add_note(self, index: int, task_name: str) -> str:
        return f"Added a note to task {index}:\n  {task_name}"

    def display_found(self, tasks: Sequence[Task]) -> str:
        if not tasks:
            return "No matching tasks found."
        lines = ["Here are the matching tasks in your list:"]
        for i, task in enumerate(tasks, start=1):
            lines.append(f"{i}.{task.render()}")
        return "\n".join(lines)

    def show_error(self, message: str) -> str:
        return f"OOPS!!! {message}"
