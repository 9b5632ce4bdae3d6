# src/ticklist/cli/render.py

"""Plain-text rendering of engine state for the console."""

from __future__ import annotations

from ..tasks.task_engine import TaskEngine
from ..tasks.task_models import FilterKind, Task


def render_progress_bar(ratio: float, width: int = 30) -> str:
    ratio = min(1.0, max(0.0, float(ratio)))
    filled = int(round(ratio * width))
    return f"[{'#' * filled}{'-' * (width - filled)}] {ratio * 100:3.0f}%"


def progress_caption(engine: TaskEngine) -> str:
    total = len(engine.tasks)
    if total == 0:
        return "No tasks yet"
    return f"{engine.completed_count()} of {total} tasks completed"


def render_task_line(task: Task, *, deleting: bool = False) -> str:
    mark = "x" if task.completed else " "
    line = f"[{mark}] {task.id:>3}  {task.text}"
    if deleting:
        line += "  (deleting)"
    return line


def render_task_list(engine: TaskEngine, kind: FilterKind | str = FilterKind.ALL) -> str:
    fk = FilterKind.parse(kind)
    tasks = engine.filter(fk)
    if not tasks:
        return f"No {fk.value} tasks." if fk != FilterKind.ALL else "No tasks yet. Type something to add one."

    pending = engine.pending_deletion_id
    return "\n".join(render_task_line(t, deleting=(t.id == pending)) for t in tasks)


def render_summary(engine: TaskEngine, *, bar_width: int = 30) -> str:
    return f"{render_progress_bar(engine.progress(), bar_width)}  {progress_caption(engine)}"
