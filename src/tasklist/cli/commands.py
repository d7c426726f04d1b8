# src/tasklist/cli/commands.py

from __future__ import annotations

from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task, TaskFilter

# Handlers get the state and the raw argument text and return the reply.
CommandHandler = Callable[[AppState, str], str]


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

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

        Handlers get the raw argument text (internal whitespace preserved).
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg_text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  (plain text without a leading / adds a task)")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def _format_task(n: int, task: Task) -> str:
    mark = "x" if task.done else " "
    return f"{n:>3}. [{mark}] {task.text}"


def render_list(state: AppState) -> str:
    """
    Render the current view and remember its order for positional addressing.
    """
    view = state.current_view()
    tasks = list(view)
    state.shown_ids = [t.id for t in tasks]

    header = f"Tasks ({state.task_filter.label}"
    if state.query.strip():
        header += f", search: {state.query.strip()!r}"
    header += "):"

    lines = [header]
    if not tasks:
        lines.append("  No tasks yet. Add one above!" if not len(state.store) else "  No matching tasks.")
    for i, t in enumerate(tasks, start=1):
        lines.append(_format_task(i, t))

    s = state.store.stats()
    lines.append(f"{s.active} active, {s.completed} completed, {s.total} total")
    return "\n".join(lines)


def resolve_task_id(state: AppState, token: str) -> str | None:
    """
    Map a user token to a task id:
    - digits -> 1-based position in the last rendered view
    - anything else -> exact id
    """
    token = token.strip()
    if not token:
        return None
    if token.isdigit():
        idx = int(token) - 1
        if 0 <= idx < len(state.shown_ids):
            return state.shown_ids[idx]
        return None
    return token if state.store.get(token) is not None else None


# ---- handlers ----


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg_text: str) -> str:
    return render_list(state)


def cmd_add(state: AppState, arg_text: str) -> str:
    if not arg_text.strip():
        return "Usage: /add <text>"
    state.store.add(arg_text)
    return render_list(state)


def cmd_toggle(state: AppState, arg_text: str) -> str:
    task_id = resolve_task_id(state, arg_text)
    if task_id is None:
        return f"No such task: {arg_text.strip() or '?'}"
    state.store.toggle(task_id)
    return render_list(state)


def cmd_remove(state: AppState, arg_text: str) -> str:
    task_id = resolve_task_id(state, arg_text)
    if task_id is None:
        return f"No such task: {arg_text.strip() or '?'}"
    state.store.remove(task_id)
    return render_list(state)


def cmd_edit(state: AppState, arg_text: str) -> str:
    """
    /edit <n|id> <text>   -> replace the text
    /edit <n|id>          -> empty text deletes the task
    """
    parts = arg_text.strip().split(maxsplit=1)
    if not parts:
        return "Usage: /edit <n|id> <text>"
    task_id = resolve_task_id(state, parts[0])
    if task_id is None:
        return f"No such task: {parts[0]}"
    state.store.edit(task_id, parts[1] if len(parts) > 1 else "")
    return render_list(state)


def cmd_clear(state: AppState, arg_text: str) -> str:
    state.store.clear_completed()
    return render_list(state)


def cmd_all(state: AppState, arg_text: str) -> str:
    """
    /all on   -> mark every task completed
    /all off  -> mark every task active
    """
    arg = arg_text.strip().lower()
    if arg in ("on", "done", "1", "true", "yes"):
        state.store.toggle_all(True)
    elif arg in ("off", "active", "0", "false", "no"):
        state.store.toggle_all(False)
    else:
        return "Usage: /all on or /all off."
    return render_list(state)


def cmd_filter(state: AppState, arg_text: str) -> str:
    if not arg_text.strip():
        return f"Filter is {state.task_filter.label}. Use /filter all|active|completed."
    try:
        state.task_filter = TaskFilter.parse(arg_text)
    except ValueError:
        return "Usage: /filter all|active|completed."
    return render_list(state)


def cmd_search(state: AppState, arg_text: str) -> str:
    """/search <text> sets the query; /search alone clears it."""
    state.query = arg_text.strip()
    return render_list(state)


def cmd_stats(state: AppState, arg_text: str) -> str:
    s = state.store.stats()
    return f"Stats:\n  Total: {s.total}\n  Active: {s.active}\n  Completed: {s.completed}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("done", cmd_toggle, help_text="Toggle completion: /done <n|id>.", aliases=["toggle", "x"])
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <n|id>.", aliases=["del", "delete"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <n|id> <text> (empty text deletes).")
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register("all", cmd_all, help_text="Complete or reset all tasks: /all on | /all off.")
registry.register("filter", cmd_filter, help_text="Filter: /filter all | active | completed.", aliases=["f"])
registry.register("search", cmd_search, help_text="Search text: /search <query> (no query clears).", aliases=["s"])
registry.register("stats", cmd_stats, help_text="Show task counts.")
