# nckuboard/models/task.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum

from ..extensions import _l


class TaskStatus(str, Enum):
    OPEN = "open"
    ACCEPTED = "accepted"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TaskStatus.OPEN: _l("Awaiting help"),
    TaskStatus.ACCEPTED: _l("Accepted"),
}


@dataclass(frozen=True)
class Task:
    """
    One help request on the board.

    Instances are immutable snapshots; the store swaps in a new snapshot on
    accept, so a Task handed to a template can never change underneath it.
    """

    id: int
    title: str
    reward: str
    content: str
    created_date: date
    publisher: str
    status: TaskStatus = TaskStatus.OPEN
    helper: str | None = None

    def __post_init__(self):
        # status is ACCEPTED iff a helper is recorded
        if (self.status is TaskStatus.ACCEPTED) != bool(self.helper):
            raise ValueError(
                f"inconsistent task #{self.id}: status={self.status.value} helper={self.helper!r}"
            )

    @property
    def is_open(self) -> bool:
        return self.status is TaskStatus.OPEN

    @property
    def publisher_handle(self) -> str:
        return self.publisher.split("@", 1)[0]

    def accepted_by(self, helper_email: str) -> Task:
        return replace(self, status=TaskStatus.ACCEPTED, helper=helper_email)
