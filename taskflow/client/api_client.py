import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx

from taskflow.domain.entities import Priority, Task
from taskflow.schemas.task import TaskResponse

logger = logging.getLogger(__name__)


class RequestFailedError(Exception):
    """A call to the task API could not complete or was answered with a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _wire_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    body = {}
    for name, value in changes.items():
        if name == "due_date":
            name = "dueDate"
        if isinstance(value, datetime):
            value = value.isoformat()
        elif isinstance(value, Priority):
            value = value.value
        body[name] = value
    return body


class TaskClient:
    """Request layer over the task API.

    "Not found" answers come back as ``None`` (or ``False`` for delete);
    anything else that goes wrong raises RequestFailedError.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "TaskClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Optional[httpx.Response]:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed (request error): {e}")
            raise RequestFailedError(f"{method} {path} failed: {e}") from e
        if response.status_code == 404:
            return None
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"{method} {path} failed (HTTP error): {e.response.status_code} - {e.response.text}")
            raise RequestFailedError(
                f"{method} {path} failed: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        return response

    @staticmethod
    def _task(response: httpx.Response) -> Task:
        try:
            return TaskResponse.model_validate(response.json()).to_task()
        except ValueError as e:
            raise RequestFailedError(f"Could not parse task from response: {e}") from e

    async def list_tasks(self) -> List[Task]:
        response = await self._request("GET", "/api/tasks")
        if response is None:
            raise RequestFailedError("GET /api/tasks failed: HTTP 404", status_code=404)
        try:
            return [TaskResponse.model_validate(item).to_task() for item in response.json()]
        except ValueError as e:
            raise RequestFailedError(f"Could not parse task list from response: {e}") from e

    async def get_task(self, task_id: str) -> Optional[Task]:
        response = await self._request("GET", f"/api/tasks/{task_id}")
        return self._task(response) if response is not None else None

    async def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        priority: Priority = Priority.MEDIUM,
        completed: bool = False,
        due_date: Optional[datetime] = None,
    ) -> Task:
        body = _wire_changes(
            {
                "title": title,
                "description": description,
                "priority": Priority(priority),
                "completed": completed,
                "due_date": due_date,
            }
        )
        response = await self._request("POST", "/api/tasks", json=body)
        if response is None:
            raise RequestFailedError("POST /api/tasks failed: HTTP 404", status_code=404)
        return self._task(response)

    async def update_task(self, task_id: str, **changes: Any) -> Optional[Task]:
        response = await self._request("PATCH", f"/api/tasks/{task_id}", json=_wire_changes(changes))
        return self._task(response) if response is not None else None

    async def toggle_task(self, task_id: str) -> Optional[Task]:
        response = await self._request("PUT", f"/api/tasks/{task_id}/toggle-complete")
        return self._task(response) if response is not None else None

    async def delete_task(self, task_id: str) -> bool:
        response = await self._request("DELETE", f"/api/tasks/{task_id}")
        return response is not None
