# src/taskmate/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class TaskStore:
    """
    JSON flat-file task store.

    File layout:
        {"version": 1, "tasks": [{"kind": "D", "name": "...", "done": false,
                                  "note": "", "due_at": "2024-12-01T23:59:00"}, ...]}

    Loading is forgiving: a missing or unreadable file yields an empty list,
    and individual malformed records are skipped with a warning.
    Saving is atomic (write to a temp file, then os.replace).
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- record codec ----

    @staticmethod
    def _ts_to_str(ts: datetime | None) -> str | None:
        return ts.isoformat() if ts is not None else None

    @staticmethod
    def _str_to_ts(raw: Any) -> datetime | None:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise ValueError(f"expected ISO timestamp string, got {type(raw).__name__}")
        ts = datetime.fromisoformat(raw)
        # Tasks are stored as local wall-clock times; aware values would not compare.
        if ts.tzinfo is not None:
            raise ValueError(f"timezone-aware timestamp not supported: {raw!r}")
        return ts

    def _task_to_record(self, task: Task) -> dict[str, Any]:
        record: dict[str, Any] = {
            "kind": task.kind.value,
            "name": task.name,
            "done": task.done,
            "note": task.note,
        }
        if task.kind is TaskKind.DEADLINE:
            record["due_at"] = self._ts_to_str(task.due_at)
        elif task.kind is TaskKind.EVENT:
            record["start_at"] = self._ts_to_str(task.start_at)
            record["end_at"] = self._ts_to_str(task.end_at)
        return record

    def _record_to_task(self, record: dict[str, Any]) -> Task:
        kind = TaskKind.from_record(record.get("kind"))
        name = record.get("name")
        if not isinstance(name, str):
            raise ValueError("task name is missing")
        done = record.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"done must be true or false, got {done!r}")
        note = record.get("note") or ""
        return Task(
            kind=kind,
            name=name,
            done=done,
            note=str(note),
            due_at=self._str_to_ts(record.get("due_at")),
            start_at=self._str_to_ts(record.get("start_at")),
            end_at=self._str_to_ts(record.get("end_at")),
        )

    # ---- public API ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read tasks from %s", self._path)
            return []

        raw_tasks = data.get("tasks") if isinstance(data, dict) else data
        if not isinstance(raw_tasks, list):
            logger.warning("Task file %s has no task list, starting empty.", self._path)
            return []

        tasks: list[Task] = []
        for pos, record in enumerate(raw_tasks, start=1):
            if not isinstance(record, dict):
                logger.warning("Skipping task record #%d: not an object", pos)
                continue
            try:
                tasks.append(self._record_to_task(record))
            except ValueError as e:
                logger.warning("Skipping task record #%d: %s", pos, e)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = {
            "version": FORMAT_VERSION,
            "tasks": [self._task_to_record(t) for t in tasks],
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
