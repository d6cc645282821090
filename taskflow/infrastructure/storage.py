import copy
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Mapping, Optional

from taskflow.domain.entities import UPDATABLE_FIELDS, Priority, Task

logger = logging.getLogger(__name__)


class TaskStorage(ABC):
    """Capability set every task backend provides.

    Missing records are reported with ``None`` / ``False``, never raised.
    """

    @abstractmethod
    def list_tasks(self) -> List[Task]:
        """All tasks, most recently created first."""

    @abstractmethod
    def get_task(self, task_id: str) -> Optional[Task]:
        ...

    @abstractmethod
    def create_task(self, task: Task) -> Task:
        """Store ``task`` under a fresh id and creation timestamp."""

    @abstractmethod
    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Optional[Task]:
        """Shallow-merge recognised fields of ``changes`` onto the stored task."""

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        ...

    @abstractmethod
    def count_tasks(self) -> int:
        ...


class MemoryTaskStorage(TaskStorage):
    """In-process task store.

    A single lock guards the whole collection; each call is one critical
    section. Callers always receive copies of the stored records.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def list_tasks(self) -> List[Task]:
        with self._lock:
            tasks = [copy.copy(t) for t in reversed(self._tasks.values())]
        # Equal timestamps keep newest-inserted first.
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    def get_task(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return copy.copy(task) if task else None

    def create_task(self, task: Task) -> Task:
        stored = copy.copy(task)
        with self._lock:
            stored.id = self._new_id()
            stored.created_at = self._clock()
            self._tasks[stored.id] = stored
            return copy.copy(stored)

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Optional[Task]:
        with self._lock:
            existing = self._tasks.get(task_id)
            if existing is None:
                return None
            updated = copy.copy(existing)
            for name, value in changes.items():
                if name in UPDATABLE_FIELDS:
                    setattr(updated, name, value)
            self._tasks[task_id] = updated
            return copy.copy(updated)

    def delete_task(self, task_id: str) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _new_id(self) -> str:
        # Unique among live tasks.
        task_id = str(uuid.uuid4())
        while task_id in self._tasks:
            task_id = str(uuid.uuid4())
        return task_id


def seed_demo_tasks(storage: TaskStorage, now: Optional[datetime] = None) -> List[Task]:
    """Insert the five demo tasks shown on a fresh install.

    One task is due on ``now`` so the "today" view has something to show.
    Each task goes through ``create_task`` so the store assigns its id; the
    creation order fixes the listing order.
    """
    now = now or datetime.now()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    demo = [
        Task(
            title="Update project documentation",
            description="Update README and API documentation",
            priority=Priority.MEDIUM,
            completed=True,
            due_date=today - timedelta(days=1),
        ),
        Task(
            title="Organize team building event",
            description="Plan and coordinate team building activities",
            priority=Priority.LOW,
            due_date=today + timedelta(days=7),
        ),
        Task(
            title="Review quarterly financial reports",
            description="Analyze Q4 financial performance and prepare summary",
            priority=Priority.HIGH,
            due_date=today + timedelta(days=2),
        ),
        Task(
            title="Review code submissions from team",
            description="Code review for latest pull requests",
            priority=Priority.MEDIUM,
            due_date=today + timedelta(days=3),
        ),
        Task(
            title="Prepare client presentation slides",
            description="Create presentation for client meeting",
            priority=Priority.HIGH,
            due_date=now,
        ),
    ]
    created = [storage.create_task(task) for task in demo]
    logger.info("Seeded %d demo tasks", len(created))
    return created
