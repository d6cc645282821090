import logging
from datetime import datetime
from typing import Any, List, Optional

from taskflow.client.api_client import TaskClient
from taskflow.domain.entities import Task
from taskflow.domain.filters import TaskStats, compute_stats, filter_list, filter_view

logger = logging.getLogger(__name__)


class TaskBoard:
    """Client-side view state.

    Holds the last fetched collection. Every mutation goes through the API
    and is followed by a re-fetch; the local list is never edited in place.
    """

    def __init__(self, client: TaskClient):
        self.client = client
        self.tasks: List[Task] = []

    async def refresh(self) -> List[Task]:
        self.tasks = await self.client.list_tasks()
        logger.debug("Fetched %d tasks", len(self.tasks))
        return self.tasks

    def view(self, view: str, now: datetime, list_filter: str = "all") -> List[Task]:
        return filter_list(filter_view(self.tasks, view, now), list_filter)

    def stats(self, now: datetime) -> TaskStats:
        return compute_stats(self.tasks, now)

    async def add(self, title: str, **fields: Any) -> Task:
        task = await self.client.create_task(title, **fields)
        await self.refresh()
        return task

    async def edit(self, task_id: str, **changes: Any) -> Optional[Task]:
        task = await self.client.update_task(task_id, **changes)
        await self.refresh()
        return task

    async def toggle(self, task_id: str) -> Optional[Task]:
        task = await self.client.toggle_task(task_id)
        await self.refresh()
        return task

    async def remove(self, task_id: str) -> bool:
        removed = await self.client.delete_task(task_id)
        await self.refresh()
        return removed
