# src/ticklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import FilterKind
from .render import render_summary, render_task_list, render_task_line

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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
        lines.append("Anything that is not a command is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _bar_width(state: AppState) -> int:
    return int(getattr(state.settings, "bar_width", 30))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.engine.add(" ".join(args))
    if task is None:
        return "Usage: /add <text>"
    return f"Added {render_task_line(task)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <id>  -> flip the completed flag
    """
    if not args:
        return "Usage: /done <id>"

    task = state.engine.toggle(args[0])
    if task is None:
        return f"No task with id {args[0]}."
    return render_task_line(task)


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /del <id>"

    task_id = args[0]
    if not any(t.id == task_id for t in state.engine.tasks):
        return f"No task with id {task_id}."

    state.engine.delete(task_id)
    return f"Deleting task {task_id}..."


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                     -> show the current filter
    /filter all|active|completed -> switch the view
    """
    if not args:
        return f"Current filter: {state.current_filter.value}. Use /filter all | active | completed."

    state.current_filter = FilterKind.parse(args[0])
    return f"Filter: {state.current_filter.value}\n" + render_task_list(state.engine, state.current_filter)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state.engine, state.current_filter)


def cmd_stats(state: AppState, args: list[str]) -> str:
    engine = state.engine
    lines = [render_summary(engine, bar_width=_bar_width(state))]
    if engine.pending_deletion_id is not None:
        lines.append(f"Pending deletion: task {engine.pending_deletion_id}")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle a task: /done <id>.", aliases=["toggle", "t"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["delete", "rm"])
registry.register(
    "filter", cmd_filter, help_text="Switch view: /filter all | active | completed.", aliases=["f"]
)
registry.register("list", cmd_list, help_text="Show tasks under the current filter.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show the progress bar and counts.")
