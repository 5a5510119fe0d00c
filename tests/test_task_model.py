# tests/test_task_model.py

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from nckuboard.models.task import Task, TaskStatus


def _task(**kw) -> Task:
    base = dict(
        id=1,
        title="Need a book",
        reward="coffee",
        content="lost my textbook",
        created_date=date(2024, 3, 1),
        publisher="pub@ncku.edu.tw",
    )
    base.update(kw)
    return Task(**base)


def test_new_task_is_open_without_helper() -> None:
    t = _task()
    assert t.status is TaskStatus.OPEN
    assert t.helper is None
    assert t.is_open


def test_inconsistent_states_cannot_be_built() -> None:
    with pytest.raises(ValueError):
        _task(status=TaskStatus.ACCEPTED)
    with pytest.raises(ValueError):
        _task(helper="h@ncku.edu.tw")


def test_accepted_by_returns_new_snapshot() -> None:
    t = _task()
    t2 = t.accepted_by("h@ncku.edu.tw")
    assert t2.status is TaskStatus.ACCEPTED
    assert t2.helper == "h@ncku.edu.tw"
    assert t.is_open  # original untouched


def test_task_is_frozen() -> None:
    t = _task()
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.helper = "h@ncku.edu.tw"  # type: ignore[misc]


def test_publisher_handle_is_local_part() -> None:
    assert _task(publisher="student1@gs.ncku.edu.tw").publisher_handle == "student1"
