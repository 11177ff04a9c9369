# src/taskdeck/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.state import AppState
from ..tasks.task_models import Priority, PriorityFilter, SortMode, Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No tasks to show."


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Plain text (no leading /) adds a task with the default priority.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] #{task.id} ({task.priority.value}) {task.text}"


def render_tasks(tasks: Iterable[Task]) -> str:
    lines = [format_task(t) for t in tasks]
    if not lines:
        return EMPTY_MESSAGE
    return "\n".join(lines)


def render_view(state: AppState) -> str:
    tasks = state.task_store.process(state.filter_priority, state.sort_mode)
    header = f"Tasks (filter={state.filter_priority.value}, sort={state.sort_mode.value}):"
    return f"{header}\n{render_tasks(tasks)}"


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


# ---- handlers ----


def add_task_from_text(state: AppState, text: str, priority: Priority | None = None) -> str:
    """Shared by /add and plain-text input. Blank text is ignored, never an error."""
    if not text.strip():
        return "Nothing to add."
    task = state.task_store.create(text, priority or state.default_priority)
    if task is None:
        return "Nothing to add."
    return f"Added #{task.id} ({task.priority.value}) {task.text}\n{render_view(state)}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text>              -> default priority
    /add high|medium|low <text>
    """
    if not args:
        return "Usage: /add [high|medium|low] <text>"

    priority: Priority | None = None
    try:
        priority = Priority.parse(args[0])
        words = args[1:]
    except ValueError:
        words = args

    return add_task_from_text(state, " ".join(words), priority)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    if not state.task_store.toggle_completion(task_id):
        return f"No task #{task_id}."
    return render_view(state)


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"

    task = state.task_store.get(task_id)
    label = f"#{task_id} {task.text}" if task is not None else f"#{task_id}"
    if not state.confirm(f"Are you sure you want to delete task {label}?"):
        return "Delete cancelled."

    removed = state.task_store.delete(task_id)
    prefix = f"Deleted {label}." if removed else f"No task #{task_id}."
    return f"{prefix}\n{render_view(state)}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Filter is {state.filter_priority.value}. Use /filter all|high|medium|low."
    try:
        state.filter_priority = PriorityFilter.parse(args[0])
    except ValueError:
        return "Usage: /filter all|high|medium|low"
    return render_view(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Sort is {state.sort_mode.value}. Use /sort latest|priority-desc|priority-asc."
    state.sort_mode = SortMode.parse(args[0])
    if state.sort_mode is SortMode.INSERTION and args[0].lower() != SortMode.INSERTION.value:
        logger.debug("Unknown sort mode %r, keeping insertion order.", args[0])
    return render_view(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_view(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.tasks
    done = sum(1 for t in tasks if t.completed)
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({len(tasks) - done} open, {done} done)\n"
        f"  Filter: {state.filter_priority.value}\n"
        f"  Sort: {state.sort_mode.value}\n"
        f"  Default priority: {state.default_priority.value}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add [high|medium|low] <text>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task (asks first): /rm <id>.", aliases=["del", "delete"])
registry.register("filter", cmd_filter, help_text="Filter by priority: /filter all|high|medium|low.")
registry.register("sort", cmd_sort, help_text="Order: /sort latest|priority-desc|priority-asc.")
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show task counts and view settings.")
