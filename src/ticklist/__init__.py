"""ticklist: a single-user task list driven by an in-memory task state engine."""

__version__ = "0.1.0"
