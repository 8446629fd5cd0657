# src/taskmate/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

DISPLAY_TIME_FORMAT = "%d %b %Y, %H:%M"


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the type tag in the rendered form ("[T]", "[D]", "[E]")
    and as the `kind` field of persisted records.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_record(cls, raw: object) -> TaskKind:
        if not raw:
            raise ValueError("task kind is missing")
        if not isinstance(raw, str):
            raise ValueError(f"task kind must be a string, got {type(raw).__name__}")
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise ValueError(f"unknown task kind: {raw!r}") from None


def _fmt(ts: datetime) -> str:
    return ts.strftime(DISPLAY_TIME_FORMAT)


@dataclass(slots=True)
class Task:
    kind: TaskKind
    name: str
    done: bool = False
    note: str = ""

    # Deadline
    due_at: datetime | None = None

    # Event
    start_at: datetime | None = None
    end_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("task name is required")
        self.name = self.name.strip()

        if self.kind is TaskKind.DEADLINE and self.due_at is None:
            raise ValueError("deadline requires a due time")

        if self.kind is TaskKind.EVENT:
            if self.start_at is None or self.end_at is None:
                raise ValueError("event requires a start and an end time")
            if self.start_at > self.end_at:
                raise ValueError("event cannot end before it starts")

    # ---- constructors ----

    @classmethod
    def todo(cls, name: str, *, done: bool = False, note: str = "") -> Task:
        return cls(TaskKind.TODO, name, done=done, note=note)

    @classmethod
    def deadline(cls, name: str, due_at: datetime, *, done: bool = False, note: str = "") -> Task:
        return cls(TaskKind.DEADLINE, name, done=done, note=note, due_at=due_at)

    @classmethod
    def event(
        cls,
        name: str,
        start_at: datetime,
        end_at: datetime,
        *,
        done: bool = False,
        note: str = "",
    ) -> Task:
        return cls(TaskKind.EVENT, name, done=done, note=note, start_at=start_at, end_at=end_at)

    # ---- state ----

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    def add_note(self, text: str) -> None:
        self.note = text

    def get_name(self) -> str:
        return self.name

    def get_note(self) -> str:
        return self.note

    # ---- rendering ----

    def _timing_suffix(self) -> str:
        if self.kind is TaskKind.DEADLINE and self.due_at is not None:
            return f" (by: {_fmt(self.due_at)})"
        if self.kind is TaskKind.EVENT and self.start_at is not None and self.end_at is not None:
            return f" (from: {_fmt(self.start_at)} to: {_fmt(self.end_at)})"
        return ""

    def render(self) -> str:
        """Canonical display form, e.g. "[D][X] submit report (by: 01 Dec 2024, 23:59)"."""
        marker = "X" if self.done else " "
        return f"[{self.kind.value}][{marker}] {self.name}{self._timing_suffix()}"

    def __str__(self) -> str:
        return self.render()
