# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from ticklist.cli.bootstrap import create_initial_state
from ticklist.core.state import AppState
from ticklist.tasks.task_engine import TaskEngine

from .fakes import FakeScheduler

DELETE_DELAY_S = 0.2


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="ticklist-test",
        log_level="DEBUG",
        delete_delay_seconds=DELETE_DELAY_S,
        bar_width=10,
    )


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def engine(scheduler: FakeScheduler) -> TaskEngine:
    return TaskEngine(delete_delay_seconds=DELETE_DELAY_S, scheduler=scheduler)


@pytest.fixture()
def state(settings: SimpleNamespace, scheduler: FakeScheduler) -> AppState:
    """AppState wired through the real bootstrap, with the manual clock."""
    return create_initial_state(settings=settings, scheduler=scheduler)
