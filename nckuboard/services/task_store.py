# nckuboard/services/task_store.py
from __future__ import annotations

import logging
import threading
from datetime import date

from ..errors import AlreadyAcceptedError, InvalidInputError, NotFoundError
from ..models.task import Task, TaskStatus
from .validator import is_institutional_email

log = logging.getLogger(__name__)

DEMO_TASK = dict(
    title="徵求微積分課本",
    reward="一杯波哥",
    content="我的課本不見了，期末考急用！",
    publisher_email="student1@gs.ncku.edu.tw",
    created_date=date(2023, 12, 25),
)


def _blank(value) -> bool:
    return not (value or "").strip()


class TaskStore:
    """
    In-memory task collection, the single source of truth for task state.

    Everything lives for the lifetime of the process; a restart goes back to
    whatever the app factory seeds. Mutations and reads share one lock, so a
    store can back a threaded server: ids are never handed out twice and only
    one of several racing accepts on the same task wins.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._index: dict[int, int] = {}  # task id -> position in _tasks
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    # -----------------
    # Reads
    # -----------------

    def list_all(self) -> list[Task]:
        """All tasks, newest first. Returns a new list on every call."""
        with self._lock:
            return list(reversed(self._tasks))

    def find_by_id(self, task_id) -> Task | None:
        with self._lock:
            pos = self._index.get(task_id)
            return self._tasks[pos] if pos is not None else None

    # -----------------
    # Writes
    # -----------------

    def create(self, title, reward, content, publisher_email, created_date: date | None = None) -> Task:
        missing = [name for name, value in (("title", title), ("reward", reward), ("content", content)) if _blank(value)]
        if missing:
            log.warning("create rejected: empty %s", ", ".join(missing))
            raise InvalidInputError(f"Required field(s) missing: {', '.join(missing)}")

        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                reward=reward,
                content=content,
                created_date=created_date or date.today(),
                publisher=publisher_email,
            )
            self._index[task.id] = len(self._tasks)
            self._tasks.append(task)
            self._next_id += 1

        log.info("Task #%s created by %s", task.id, publisher_email)
        return task

    def accept(self, task_id, helper_email) -> Task:
        if _blank(helper_email) or not is_institutional_email(helper_email):
            log.warning("accept rejected for task #%s: bad helper email %r", task_id, helper_email)
            raise InvalidInputError("Helper email must be an NCKU address.")

        with self._lock:
            pos = self._index.get(task_id)
            if pos is None:
                raise NotFoundError(task_id)
            task = self._tasks[pos]
            if task.status is TaskStatus.ACCEPTED:
                log.warning("Task #%s already accepted by %s; %s turned away", task_id, task.helper, helper_email)
                raise AlreadyAcceptedError(task_id, helper=task.helper)
            task = task.accepted_by(helper_email)
            self._tasks[pos] = task

        log.info("Task #%s accepted by %s", task.id, helper_email)
        return task

    def seed_demo_task(self) -> Task:
        return self.create(**DEMO_TASK)
