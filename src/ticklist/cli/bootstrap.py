# src/ticklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the task engine (and its timer facility) into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TimerScheduler
from ..core.state import AppState
from ..tasks.task_engine import DEFAULT_DELETE_DELAY_SECONDS, TaskEngine

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, scheduler: TimerScheduler | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the scheduler injectable makes the app easier to test.
    If settings is None, falls back to get_settings(). If scheduler is None, the
    engine binds to the running asyncio loop on first delete.
    """
    if settings is None:
        settings = get_settings()

    delay_s = getattr(settings, "delete_delay_seconds", DEFAULT_DELETE_DELAY_SECONDS)
    engine = TaskEngine(delete_delay_seconds=delay_s, scheduler=scheduler)
    logger.debug("Task engine ready (delete delay %.3fs)", engine.delete_delay_seconds)

    return AppState(settings=settings, engine=engine)
