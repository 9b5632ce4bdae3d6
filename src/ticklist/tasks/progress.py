# src/ticklist/tasks/progress.py

from __future__ import annotations

"""
Progress signal.

The engine only owns the settle value (completed / total). Listeners receive
(previous, new) on every recompute and decide how to get from one to the
other: a console snaps, a graphical client may spring or ease.
"""

import logging
from collections.abc import Callable, Iterable

from ..core.ports import ProgressListener
from .task_models import Task

logger = logging.getLogger(__name__)


def completion_ratio(tasks: Iterable[Task]) -> float:
    """Completed share in [0, 1]; 0.0 for an empty collection."""
    total = 0
    done = 0
    for t in tasks:
        total += 1
        if t.completed:
            done += 1
    if total == 0:
        return 0.0
    return done / total


class ProgressSignal:
    """Observable float with a settle value."""

    def __init__(self, initial: float = 0.0) -> None:
        self._value = float(initial)
        self._listeners: list[ProgressListener] = []

    @property
    def value(self) -> float:
        return self._value

    def subscribe(self, listener: ProgressListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def settle_at(self, target: float) -> None:
        """
        Set a new settle value and notify listeners.

        Listeners are notified even when the value is unchanged: every mutation
        re-announces the ratio, and a presentation layer may be mid-transition.
        """
        previous = self._value
        self._value = float(target)

        for listener in list(self._listeners):
            try:
                listener(previous, self._value)
            except Exception:
                logger.exception("Progress listener failed (%.3f -> %.3f)", previous, self._value)
