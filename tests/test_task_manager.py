# tests/test_task_manager.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskmate.tasks.task_manager import TaskIndexError, TaskManager
from taskmate.tasks.task_models import Task

from .fakes import RecordingUI


def _names(manager: TaskManager) -> list[str]:
    return [t.name for t in manager.get_list()]


def test_add_keeps_count_and_insertion_order() -> None:
    manager = TaskManager()
    for i in range(5):
        manager.add(Task.todo(f"task {i}"))

    assert manager.num_of_tasks == 5
    assert len(manager) == 5
    assert _names(manager) == [f"task {i}" for i in range(5)]

    listing = manager.list_tasks()
    assert listing.index("1.[T][ ] task 0") < listing.index("5.[T][ ] task 4")


def test_seeded_manager_derives_count() -> None:
    seed = [Task.todo("a"), Task.todo("b"), Task.todo("c")]
    manager = TaskManager(seed)
    assert manager.num_of_tasks == 3

    # the manager owns its own list: mutating the seed afterwards has no effect
    seed.append(Task.todo("d"))
    assert manager.num_of_tasks == 3


def test_presenter_receives_structured_data() -> None:
    ui = RecordingUI()
    manager = TaskManager(ui=ui)

    assert manager.add(Task.todo("read book")) == "add_task:read book:1"
    assert manager.mark(1) == "mark_task:read book"
    assert manager.unmark(1) == "unmark_task:read book"
    assert manager.add_note(1, "chapter 3") == "add_note:1:read book"
    assert manager.get_description(1) == "get_description:chapter 3"
    assert manager.list_tasks() == "display_list:1:1"
    assert manager.find("book") == "display_found:1"
    assert manager.delete(1) == "delete_task:read book:0"


def test_mark_then_unmark_restores_flag() -> None:
    manager = TaskManager([Task.todo("a"), Task.todo("b", done=True)])

    manager.mark(1)
    manager.unmark(1)
    assert manager.get_list()[0].done is False

    manager.mark(2)
    assert manager.get_list()[1].done is True


def test_delete_shifts_later_tasks_down() -> None:
    manager = TaskManager([Task.todo(n) for n in ("a", "b", "c", "d")])

    manager.delete(2)

    assert manager.num_of_tasks == 3
    assert _names(manager) == ["a", "c", "d"]

    manager.mark(2)
    assert manager.get_list()[1].name == "c"
    assert manager.get_list()[1].done is True


@pytest.mark.parametrize("index", [0, -1, 4, 100])
def test_out_of_range_index_fails_without_mutation(index: int) -> None:
    manager = TaskManager([Task.todo("a"), Task.todo("b"), Task.todo("c")])
    before = [(t.name, t.done, t.note) for t in manager.get_list()]

    for op in (
        lambda: manager.mark(index),
        lambda: manager.unmark(index),
        lambda: manager.delete(index),
        lambda: manager.get_description(index),
        lambda: manager.add_note(index, "x"),
    ):
        with pytest.raises(TaskIndexError) as excinfo:
            op()
        assert excinfo.value.count == 3

    assert manager.num_of_tasks == 3
    assert [(t.name, t.done, t.note) for t in manager.get_list()] == before


def test_index_error_is_an_index_error_with_message() -> None:
    manager = TaskManager()
    with pytest.raises(IndexError, match="There are only 0 tasks"):
        manager.mark(1)


def test_filter_list_is_case_sensitive_substring_in_order() -> None:
    manager = TaskManager(
        [
            Task.todo("read book"),
            Task.todo("Return Book"),
            Task.deadline("book flights", datetime(2024, 7, 1, 9, 0)),
            Task.todo("groceries"),
        ]
    )

    found = manager.filter_list("book")
    assert [t.name for t in found] == ["read book", "book flights"]

    # matches the rendered form, including tags and timing suffix
    assert [t.name for t in manager.filter_list("[D]")] == ["book flights"]
    assert [t.name for t in manager.filter_list("Jul 2024")] == ["book flights"]

    assert manager.filter_list("nothing here") == []


def test_filter_list_returns_a_new_list() -> None:
    manager = TaskManager([Task.todo("a")])
    found = manager.filter_list("a")
    found.clear()
    assert manager.num_of_tasks == 1


def test_get_list_is_a_snapshot() -> None:
    manager = TaskManager([Task.todo("a")])
    snapshot = manager.get_list()

    assert isinstance(snapshot, tuple)
    manager.add(Task.todo("b"))
    assert len(snapshot) == 1
    assert manager.num_of_tasks == 2


def test_walkthrough_scenario() -> None:
    manager = TaskManager()

    manager.add(Task.todo("read book"))
    assert manager.num_of_tasks == 1
    assert "[T][ ] read book" in manager.list_tasks()

    manager.mark(1)
    assert "[T][X] read book" in manager.list_tasks()

    manager.add(Task.deadline("submit report", datetime(2024, 12, 1, 23, 59)))
    assert manager.num_of_tasks == 2

    manager.delete(1)
    assert manager.num_of_tasks == 1
    listing = manager.list_tasks()
    assert "1.[D][ ] submit report (by: 01 Dec 2024, 23:59)" in listing
    assert "read book" not in listing

    with pytest.raises(TaskIndexError) as excinfo:
        manager.mark(5)
    assert excinfo.value.count == 1
