# src/ticklist/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.render import render_progress_bar, render_summary, render_task_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def handle_line(state: AppState, line: str) -> str | None:
    """
    One line of user input -> reply text (or None for nothing to print).

    Slash commands go to the registry; anything else is a new task, the same way
    a text field + "add" button works in a graphical client.
    """
    line = line.strip()
    if not line:
        return None

    cmd_response = command_registry.handle(state, line)
    if cmd_response is not None:
        return cmd_response

    task = state.engine.add(line)
    if task is None:
        return None
    return f"Added {render_task_line(task)}"


async def read_line(prompt: str, input_fn: Callable[[str], str] = input) -> str:
    """
    Read one line without blocking the event loop.

    The blocking read runs on a daemon thread, not the default executor: a
    cancelled read (Ctrl-C) must not keep asyncio.run() waiting for Enter.
    EOFError from input_fn is re-raised here.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _deliver(result: str | None, exc: BaseException | None) -> None:
        if fut.done():
            return
        if exc is not None:
            fut.set_exception(exc)
        else:
            fut.set_result(result or "")

    def _worker() -> None:
        try:
            line = input_fn(prompt)
        except Exception as e:
            result, exc = None, e
        else:
            result, exc = line, None
        try:
            loop.call_soon_threadsafe(_deliver, result, exc)
        except RuntimeError:
            # Loop already closed (shutdown while the read was pending).
            logger.debug("Console read finished after loop shutdown")

    threading.Thread(target=_worker, name="console-input", daemon=True).start()
    return await fut


async def run_console_loop(state: AppState, *, input_fn: Callable[[str], str] = input) -> None:
    """
    Async REPL.

    Reads happen off the loop thread so deletion commits keep firing while the
    prompt waits. Ends on /exit, /quit, EOF or cancellation.
    """
    engine = state.engine
    bar_width = int(getattr(state.settings, "bar_width", 30))

    logger.info("Console connector started.")
    _print_ts("Type a task to add it. Use /help for commands. Use /exit to quit.")
    _print_ts(render_summary(engine, bar_width=bar_width))

    def _on_progress(previous: float, new: float) -> None:
        if abs(previous - new) < 1e-9:
            return
        _print_ts(f"Progress {render_progress_bar(new, bar_width)}")

    unsubscribe = engine.progress_signal.subscribe(_on_progress)

    try:
        while True:
            try:
                user_input = await read_line(PROMPT, input_fn)
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except asyncio.CancelledError:
                logger.info("Console interrupted, exiting.")
                print()
                raise

            user_input = user_input.strip()
            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = handle_line(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                _print_ts(reply)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
