"""
Task subsystem.

Components:
- task_models.py: data structures (Task, FilterKind)
- progress.py: completion ratio + observable progress signal
- task_engine.py: the task state engine (add/toggle/two-phase delete/filter)
"""

from .progress import ProgressSignal, completion_ratio
from .task_engine import TaskEngine
from .task_models import FilterKind, Task

__all__ = ["FilterKind", "ProgressSignal", "Task", "TaskEngine", "completion_ratio"]
