# src/task_tracker/cli/menu.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..core.state import AppState
from ..errors import TaskNotFoundError
from ..tasks.task_api import create_task, set_task_status
from ..tasks.task_models import Task, TaskPriority, TaskStatus

Prompt = Callable[[str], str]
Writer = Callable[[str], None]
MenuHandler = Callable[[AppState, Prompt], str]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler | None  # None => exit


class MenuRegistry:
    """Numbered text menu (Add / View pending / ...); entries keep registration order."""

    def __init__(self) -> None:
        self._entries: list[MenuEntry] = []
        self._by_choice: dict[str, MenuEntry] = {}

    def register(
        self,
        key: str,
        label: str,
        handler: MenuHandler | None,
        aliases: list[str] | None = None,
    ) -> None:
        entry = MenuEntry(key=key, label=label, handler=handler)
        self._entries.append(entry)
        for choice in [key, *(aliases or [])]:
            self._by_choice[choice.lower()] = entry

    def render(self) -> str:
        lines = ["", "Task Manager"]
        for entry in self._entries:
            lines.append(f"  {entry.key}. {entry.label}")
        return "\n".join(lines)

    def handle(self, state: AppState, choice: str, ask: Prompt) -> str | None:
        """
        Run the action for `choice`.
        Returns the text to show, or None when the choice means exit.
        """
        entry = self._by_choice.get(choice.strip().lower())
        if entry is None:
            return f"Unknown option: {choice!r}. Pick one of the numbers above."
        if entry.handler is None:
            return None

        try:
            return entry.handler(state, ask)
        except (ValueError, TaskNotFoundError) as e:
            logger.info("Menu action %r rejected: %s", entry.label, e)
            return f"Error: {e}"


registry = MenuRegistry()


def _ts_local(ts: datetime) -> str:
    return ts.astimezone().strftime("%Y-%m-%d %H:%M")


def format_task(task: Task) -> str:
    line = f"[{task.id}] {task.title} ({task.priority}, {task.status})"
    if task.description:
        line += f" - {task.description}"
    return f"{line}  created {_ts_local(task.created_at)}, updated {_ts_local(task.updated_at)}"


def _choices(enum_cls) -> str:
    return ", ".join(f"{i}={m.value}" for i, m in enumerate(enum_cls, start=1))


def _ask_task_id(ask: Prompt) -> int:
    raw = ask("Task id: ").strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"task id must be a whole number, got {raw!r}") from None


def cmd_add(state: AppState, ask: Prompt) -> str:
    title = ask("Title: ")
    description = ask("Description (optional): ")
    raw_priority = ask(f"Priority [{_choices(TaskPriority)}] (default Medium): ").strip()
    priority = TaskPriority.parse(raw_priority) if raw_priority else TaskPriority.MEDIUM

    task = create_task(
        state.task_store,
        title=title,
        description=description,
        priority=priority,
    )
    return f"Added: {format_task(task)}"


def cmd_view_pending(state: AppState, ask: Prompt) -> str:
    tasks = state.task_store.list_by_status(TaskStatus.PENDING)
    if not tasks:
        return "No pending tasks."
    lines = [f"Pending tasks ({len(tasks)}):"]
    lines.extend(f"  {format_task(t)}" for t in tasks)
    return "\n".join(lines)


def cmd_update_status(state: AppState, ask: Prompt) -> str:
    task_id = _ask_task_id(ask)
    status = TaskStatus.parse(ask(f"New status [{_choices(TaskStatus)}]: "))
    task = set_task_status(state.task_store, task_id, status)
    return f"Updated: {format_task(task)}"


def cmd_delete(state: AppState, ask: Prompt) -> str:
    task_id = _ask_task_id(ask)
    removed = state.task_store.delete_task(task_id)
    if not removed:
        return f"No task with id {task_id}; nothing deleted."
    return f"Deleted task {task_id}."


def run_menu_loop(state: AppState, *, read_line: Prompt = input, write: Writer = print) -> None:
    logger.info("Menu started (tasks=%d).", state.task_store.count_tasks())

    while True:
        write(registry.render())
        try:
            choice = read_line("Choose an option: ").strip()
        except EOFError:
            logger.info("Menu EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Menu KeyboardInterrupt, exiting.")
            write("")
            break

        if not choice:
            continue

        try:
            reply = registry.handle(state, choice, read_line)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed during a menu action, exiting.")
            break
        except Exception:
            logger.exception("Menu action crashed (choice=%r).", choice)
            reply = "Internal error while handling this action."

        if reply is None:
            logger.info("Menu exit chosen.")
            break
        write(reply)

    logger.info("Menu finished.")


registry.register("1", "Add task", cmd_add, aliases=["add", "a"])
registry.register("2", "View pending tasks", cmd_view_pending, aliases=["view", "v", "list"])
registry.register("3", "Update task status", cmd_update_status, aliases=["update", "u"])
registry.register("4", "Delete task", cmd_delete, aliases=["delete", "d"])
registry.register("5", "Exit", None, aliases=["exit", "quit", "q"])
