import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional

from taskflow.domain.entities import Priority, Task
from taskflow.infrastructure.storage import TaskStorage

logger = logging.getLogger(__name__)


class TaskUseCases:
    def __init__(self, storage: TaskStorage):
        self.storage = storage

    def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        priority: Priority = Priority.MEDIUM,
        completed: bool = False,
        due_date: Optional[datetime] = None,
    ) -> Task:
        task = Task(
            title=title,
            description=description,
            priority=Priority(priority),
            completed=completed,
            due_date=due_date,
        )
        created = self.storage.create_task(task)
        logger.info("Created task %s (%s)", created.id, created.title)
        return created

    def get_task(self, task_id: str) -> Optional[Task]:
        return self.storage.get_task(task_id)

    def get_all_tasks(self) -> List[Task]:
        return self.storage.list_tasks()

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Optional[Task]:
        updated = self.storage.update_task(task_id, changes)
        if updated:
            logger.info("Updated task %s fields=%s", task_id, sorted(changes))
        return updated

    def toggle_task_completion(self, task_id: str) -> Optional[Task]:
        task = self.get_task(task_id)
        if not task:
            return None
        logger.info("Toggling task %s: current completed = %s", task_id, task.completed)
        return self.update_task(task_id, {"completed": not task.completed})

    def delete_task(self, task_id: str) -> bool:
        deleted = self.storage.delete_task(task_id)
        if deleted:
            logger.info("Deleted task %s", task_id)
        return deleted

    def count_tasks(self) -> int:
        return self.storage.count_tasks()
