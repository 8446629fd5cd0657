# src/taskmate/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import AppState
from ..tasks.task_manager import TaskIndexError
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

INPUT_TIME_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H%M",
    "%Y-%m-%d",
)


class CommandUsageError(ValueError):
    """Raised by handlers when the arguments cannot be parsed."""


class CommandRegistry:
    """Text command registry used by the console connector (todo, list, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._mutating: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        mutates: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in [key, *(a.lower() for a in aliases)]:
            self._handlers[alias] = handler
            if mutates:
                self._mutating.add(alias)

    def handle(self, state: AppState, line: str) -> str:
        """
        Handle a string like "mark 2" (a leading "/" is accepted too).
        Always returns a reply string.
        """
        parts = line.strip().removeprefix("/").split()
        if not parts:
            return "Empty command. Use help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            reply = handler(state, args)
        except (CommandUsageError, TaskIndexError) as e:
            return state.ui.show_error(str(e))

        if name in self._mutating and getattr(state.settings, "autosave", True):
            try:
                state.save()
            except OSError:
                logger.exception("Autosave failed after command %s", name)
                reply += "\n" + state.ui.show_error("Could not save tasks to disk.")
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  bye - Save and exit.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----

def parse_datetime(raw: str) -> datetime:
    raw = raw.strip()
    for fmt in INPUT_TIME_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    raise CommandUsageError(
        f"Cannot read date/time {raw!r}. Use YYYY-MM-DD HH:MM (e.g. 2024-12-01 23:59)."
    )


def _parse_index(args: list[str], usage: str) -> int:
    if not args:
        raise CommandUsageError(usage)
    try:
        return int(args[0].rstrip("."))
    except ValueError:
        raise CommandUsageError(usage) from None


def _split_on(args: list[str], flag: str, usage: str) -> tuple[list[str], list[str]]:
    """Split args at the first `flag` token; both sides must be non-empty."""
    try:
        pos = args.index(flag)
    except ValueError:
        raise CommandUsageError(usage) from None
    head, tail = args[:pos], args[pos + 1 :]
    if not head or not tail:
        raise CommandUsageError(usage)
    return head, tail


# ---- handlers ----

def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_todo(state: AppState, args: list[str]) -> str:
    if not args:
        raise CommandUsageError("The description of a todo cannot be empty. Usage: todo <name>")
    return state.manager.add(Task.todo(" ".join(args)))


def cmd_deadline(state: AppState, args: list[str]) -> str:
    usage = "Usage: deadline <name> /by <YYYY-MM-DD HH:MM>"
    name, due = _split_on(args, "/by", usage)
    return state.manager.add(Task.deadline(" ".join(name), parse_datetime(" ".join(due))))


def cmd_event(state: AppState, args: list[str]) -> str:
    usage = "Usage: event <name> /from <YYYY-MM-DD HH:MM> /to <YYYY-MM-DD HH:MM>"
    name, when = _split_on(args, "/from", usage)
    start, end = _split_on(when, "/to", usage)
    try:
        task = Task.event(
            " ".join(name),
            parse_datetime(" ".join(start)),
            parse_datetime(" ".join(end)),
        )
    except CommandUsageError:
        raise
    except ValueError as e:
        raise CommandUsageError(f"Invalid event: {e}.") from None
    return state.manager.add(task)


def cmd_list(state: AppState, args: list[str]) -> str:
    return state.manager.list_tasks()


def cmd_mark(state: AppState, args: list[str]) -> str:
    return state.manager.mark(_parse_index(args, "Usage: mark <task number>"))


def cmd_unmark(state: AppState, args: list[str]) -> str:
    return state.manager.unmark(_parse_index(args, "Usage: unmark <task number>"))


def cmd_delete(state: AppState, args: list[str]) -> str:
    return state.manager.delete(_parse_index(args, "Usage: delete <task number>"))


def cmd_note(state: AppState, args: list[str]) -> str:
    """
    note 2 bring the slides  -> set the note of task 2
    """
    usage = "Usage: note <task number> <text>"
    index = _parse_index(args, usage)
    text = " ".join(args[1:]).strip()
    if not text:
        raise CommandUsageError(usage)
    return state.manager.add_note(index, text)


def cmd_desc(state: AppState, args: list[str]) -> str:
    return state.manager.get_description(_parse_index(args, "Usage: desc <task number>"))


def cmd_find(state: AppState, args: list[str]) -> str:
    if not args:
        raise CommandUsageError("Usage: find <keyword>")
    return state.manager.find(" ".join(args))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("todo", cmd_todo, help_text="Add a todo: todo <name>.", mutates=True)
registry.register(
    "deadline",
    cmd_deadline,
    help_text="Add a deadline: deadline <name> /by <YYYY-MM-DD HH:MM>.",
    mutates=True,
)
registry.register(
    "event",
    cmd_event,
    help_text="Add an event: event <name> /from <YYYY-MM-DD HH:MM> /to <YYYY-MM-DD HH:MM>.",
    mutates=True,
)
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark <n>.", mutates=True)
registry.register(
    "unmark", cmd_unmark, help_text="Mark a task as not done: unmark <n>.", mutates=True
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: delete <n>.", aliases=["rm"], mutates=True
)
registry.register(
    "note", cmd_note, help_text="Attach a note to a task: note <n> <text>.", mutates=True
)
registry.register("desc", cmd_desc, help_text="Show the note of a task: desc <n>.")
registry.register("find", cmd_find, help_text="Find tasks containing a keyword: find <keyword>.")
