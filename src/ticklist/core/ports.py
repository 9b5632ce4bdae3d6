# src/ticklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The engine depends on Protocols instead of concrete implementations.
This keeps the timer facility swappable (asyncio loop in the app, a manual
clock in tests) and lets any presentation layer observe state.
"""

from typing import Any, Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """
    One-shot deferred callbacks on the single event loop.

    asyncio.AbstractEventLoop satisfies this protocol as-is.
    """

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


ProgressListener = Callable[[float, float], None]
# Called with (previous, new) settle value.

ChangeListener = Callable[[Any], None]
# Called with the engine after every state change.
