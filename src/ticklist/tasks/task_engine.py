# src/ticklist/tasks/task_engine.py

from __future__ import annotations

"""
Task state engine.

Owns the authoritative task collection and everything derived from it:
- add / toggle mutate the collection immediately,
- delete is two-phase: mark the id as pending, then remove it from a one-shot
  timer after `delete_delay_seconds` so a removal animation can play,
- filter / completed_count / progress are read-only views.

All calls happen on the event loop thread. The only deferred code path is the
delete commit, and it is the only one that removes entries.
"""

import asyncio
import itertools
import logging
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import ChangeListener, TimerHandle, TimerScheduler
from .progress import ProgressSignal, completion_ratio
from .task_models import FilterKind, Task

logger = logging.getLogger(__name__)

DEFAULT_DELETE_DELAY_SECONDS = 0.2


def _counter_ids() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: str(next(counter))


class TaskEngine:
    def __init__(
        self,
        *,
        delete_delay_seconds: float = DEFAULT_DELETE_DELAY_SECONDS,
        scheduler: TimerScheduler | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._delete_delay_s = max(0.0, float(delete_delay_seconds))
        self._scheduler = scheduler
        self._next_id = id_factory or _counter_ids()

        self._tasks: list[Task] = []
        self._pending_deletion_id: str | None = None

        # One entry per delete() call, so repeated deletes never share a timer.
        self._timer_seq = itertools.count(1)
        self._timers: dict[int, tuple[str, TimerHandle]] = {}

        self._progress = ProgressSignal(0.0)
        self._listeners: list[ChangeListener] = []
        self._closed = False

    # ---- observable state ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def pending_deletion_id(self) -> str | None:
        return self._pending_deletion_id

    @property
    def scheduled_deletions(self) -> tuple[str, ...]:
        """Ids with a commit timer still outstanding (oldest first)."""
        return tuple(task_id for task_id, _ in self._timers.values())

    @property
    def progress_signal(self) -> ProgressSignal:
        return self._progress

    @property
    def delete_delay_seconds(self) -> float:
        return self._delete_delay_s

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call `listener(engine)` after every state change. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ---- mutations ----

    def add(self, text: str) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            logger.debug("Ignoring empty task text")
            return None

        task_id = self._next_id()
        while self._index_of(task_id) is not None:
            task_id = self._next_id()

        task = Task(id=task_id, text=clean, completed=False)
        self._tasks.append(task)
        logger.debug("Task %s added: %r", task.id, task.text)

        self._recompute_progress()
        self._notify()
        return task

    def toggle(self, task_id: str) -> Task | None:
        task_id = str(task_id)
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle: no task with id=%s", task_id)
            return None

        old = self._tasks[idx]
        new = replace(old, completed=not old.completed)
        # Only the target slot is replaced; the other Task objects stay as they are.
        self._tasks[idx] = new
        logger.debug("Task %s -> completed=%s", new.id, new.completed)

        self._recompute_progress()
        self._notify()
        return new

    def delete(self, task_id: str) -> None:
        """
        Phase 1 of a removal: flag `task_id` and schedule the commit.

        The task stays visible until the commit fires. Every call gets its own
        timer; the pending marker always names the most recent request.
        """
        if self._closed:
            logger.warning("delete(%s) after close(); ignored", task_id)
            return

        task_id = str(task_id)
        facility = self._timer_facility()
        if facility is None:
            # Nothing could ever commit it, so do not flag the row either.
            logger.warning("delete(%s) without a running event loop; ignored", task_id)
            return

        self._pending_deletion_id = task_id

        seq = next(self._timer_seq)
        handle = facility.call_later(self._delete_delay_s, self._commit_delete, seq, task_id)
        self._timers[seq] = (task_id, handle)
        logger.debug("Task %s pending deletion (commit in %.3fs)", task_id, self._delete_delay_s)

        self._notify()

    def _commit_delete(self, seq: int, task_id: str) -> None:
        """Phase 2: runs from the timer."""
        self._timers.pop(seq, None)

        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete commit: task %s already gone", task_id)
        else:
            del self._tasks[idx]
            logger.debug("Task %s deleted", task_id)
            self._recompute_progress()

        # A newer delete() may own the marker by now; leave it alone in that case.
        if self._pending_deletion_id == task_id:
            self._pending_deletion_id = None

        self._notify()

    def close(self) -> None:
        """Tear down: cancel outstanding commits. Pending tasks are not removed."""
        for _task_id, handle in self._timers.values():
            handle.cancel()
        if self._timers:
            logger.info("Engine closed with %d deletion(s) still pending", len(self._timers))
        self._timers.clear()
        self._pending_deletion_id = None
        self._closed = True

    # ---- views ----

    def filter(self, kind: FilterKind | str = FilterKind.ALL) -> list[Task]:
        fk = FilterKind.parse(kind)
        return [t for t in self._tasks if t.matches(fk)]

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def progress(self) -> float:
        return self._progress.value

    # ---- internals ----

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _timer_facility(self) -> TimerScheduler | None:
        if self._scheduler is None:
            # Bound lazily: the engine may be built before the loop starts.
            try:
                self._scheduler = asyncio.get_running_loop()
            except RuntimeError:
                return None
        return self._scheduler

    def _recompute_progress(self) -> None:
        self._progress.settle_at(completion_ratio(self._tasks))

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Task engine listener failed")
