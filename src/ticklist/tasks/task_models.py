# src/ticklist/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)


class FilterKind(StrEnum):
    """Which slice of the task list a view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | FilterKind | None) -> FilterKind:
        """
        Lenient conversion used at the engine boundary.

        Unknown or empty values fall back to ALL; they are logged, never raised.
        """
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls.ALL
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            logger.warning("Unknown filter kind %r, using %r", raw, cls.ALL.value)
            return cls.ALL


@dataclass(slots=True, frozen=True)
class Task:
    id: str
    text: str
    completed: bool = False

    def matches(self, kind: FilterKind) -> bool:
        if kind == FilterKind.ACTIVE:
            return not self.completed
        if kind == FilterKind.COMPLETED:
            return self.completed
        return True
