# src/taskdeck/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_task_from_text, render_view
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

YES_ANSWERS = frozenset({"y", "yes"})


def make_console_confirm(input_fn: InputFn = input) -> Callable[[str], bool]:
    """Build a yes/no prompt; EOF or Ctrl+C counts as "no"."""

    def confirm(question: str) -> bool:
        try:
            answer = input_fn(f"{question} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in YES_ANSWERS

    return confirm


def handle_line(state: AppState, line: str) -> str | None:
    """
    One gesture: a slash command or plain text (adds a task).
    Returns the text to show, or None when there is nothing to print.
    """
    line = line.strip()
    if not line:
        return None

    try:
        cmd_response = command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    try:
        return add_task_from_text(state, line)
    except Exception:
        logger.exception("Adding a task from plain text failed.")
        return "Internal error while adding a task."


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> None:
    logger.info("Console connector started (tasks=%s).", state.task_store.count())
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskdeck"))

    output(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.")
    output(render_view(state))

    while True:
        try:
            user_input = input_fn("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            output(reply)

    logger.info("Console connector finished.")
