"""
Pure view logic over a fetched task collection.

Every date-based predicate takes the reference ``now`` explicitly so callers
(and tests) decide what "today" means.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, List

from taskflow.domain.entities import Priority, Task

WEEK_WINDOW = timedelta(days=7)

VIEWS = ("all", "today", "week", "completed", "high")
LIST_FILTERS = ("all", "active", "completed", "high")


def _same_day(a: datetime, b: datetime) -> bool:
    if a.tzinfo is not None and b.tzinfo is not None:
        a = a.astimezone(b.tzinfo)
    return a.date() == b.date()


def _comparable(value: datetime, now: datetime) -> datetime:
    # Naive and aware datetimes cannot be compared; align to now's tz.
    if value.tzinfo is None and now.tzinfo is not None:
        return value.replace(tzinfo=now.tzinfo)
    if value.tzinfo is not None and now.tzinfo is None:
        return value.replace(tzinfo=None)
    return value


def is_due_today(task: Task, now: datetime) -> bool:
    if task.due_date is None:
        return False
    return _same_day(task.due_date, now)


def is_due_this_week(task: Task, now: datetime) -> bool:
    """Due within the next seven days. Overdue tasks count too."""
    if task.due_date is None:
        return False
    return _comparable(task.due_date, now) <= now + WEEK_WINDOW


def is_completed(task: Task) -> bool:
    return task.completed


def is_active(task: Task) -> bool:
    return not task.completed


def is_high_priority(task: Task) -> bool:
    return Priority(task.priority) is Priority.HIGH


def is_open_high_priority(task: Task) -> bool:
    return is_high_priority(task) and not task.completed


def filter_view(tasks: Iterable[Task], view: str, now: datetime) -> List[Task]:
    """Tasks shown for a sidebar view."""
    predicates: Dict[str, Callable[[Task], bool]] = {
        "all": lambda t: True,
        "today": lambda t: is_due_today(t, now),
        "week": lambda t: is_due_this_week(t, now),
        "completed": is_completed,
        "high": is_open_high_priority,
    }
    if view not in predicates:
        raise ValueError(f"Unknown view '{view}'. Expected one of: {', '.join(VIEWS)}")
    return [t for t in tasks if predicates[view](t)]


def filter_list(tasks: Iterable[Task], list_filter: str) -> List[Task]:
    """Tasks shown for an in-list filter tab."""
    predicates: Dict[str, Callable[[Task], bool]] = {
        "all": lambda t: True,
        "active": is_active,
        "completed": is_completed,
        "high": is_high_priority,
    }
    if list_filter not in predicates:
        raise ValueError(
            f"Unknown filter '{list_filter}'. Expected one of: {', '.join(LIST_FILTERS)}"
        )
    return [t for t in tasks if predicates[list_filter](t)]


@dataclass(frozen=True)
class TaskStats:
    total: int
    completed: int
    in_progress: int
    high_priority: int
    today: int
    this_week: int
    completed_today: int
    total_today: int
    productivity_score: int


def compute_stats(tasks: Iterable[Task], now: datetime) -> TaskStats:
    tasks = list(tasks)
    completed = sum(1 for t in tasks if t.completed)
    today = [t for t in tasks if is_due_today(t, now)]
    # Halves round up.
    score = int(completed * 100 / len(tasks) + 0.5) if tasks else 0
    return TaskStats(
        total=len(tasks),
        completed=completed,
        in_progress=len(tasks) - completed,
        high_priority=sum(1 for t in tasks if is_open_high_priority(t)),
        today=len(today),
        this_week=sum(1 for t in tasks if is_due_this_week(t, now)),
        completed_today=sum(1 for t in today if t.completed),
        total_today=len(today),
        productivity_score=score,
    )
