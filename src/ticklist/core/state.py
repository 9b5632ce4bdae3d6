# src/ticklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_engine import TaskEngine
from ..tasks.task_models import FilterKind


@dataclass
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: Any

    engine: TaskEngine

    # Presentation-side choice; the engine itself is stateless about views.
    current_filter: FilterKind = FilterKind.ALL
