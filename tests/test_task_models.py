# tests/test_task_models.py

from __future__ import annotations

import dataclasses

import pytest

from ticklist.tasks.task_models import FilterKind, Task


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("all", FilterKind.ALL),
        ("Active", FilterKind.ACTIVE),
        (" completed ", FilterKind.COMPLETED),
        (FilterKind.ACTIVE, FilterKind.ACTIVE),
        (None, FilterKind.ALL),
        ("done", FilterKind.ALL),
    ],
)
def test_filter_kind_parse(raw, expected) -> None:
    assert FilterKind.parse(raw) is expected


def test_task_is_immutable() -> None:
    t = Task(id="1", text="a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.text = "b"  # type: ignore[misc]


def test_task_matches() -> None:
    done = Task(id="1", text="a", completed=True)
    open_ = Task(id="2", text="b")

    assert done.matches(FilterKind.ALL) and open_.matches(FilterKind.ALL)
    assert done.matches(FilterKind.COMPLETED) and not open_.matches(FilterKind.COMPLETED)
    assert open_.matches(FilterKind.ACTIVE) and not done.matches(FilterKind.ACTIVE)
