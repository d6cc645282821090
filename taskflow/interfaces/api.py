# interfaces/api.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from taskflow.application.use_cases import TaskUseCases
from taskflow.schemas.task import DeleteResponse, TaskCreate, TaskResponse, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_use_cases(request: Request) -> TaskUseCases:
    """The store handle created by create_app()."""
    return request.app.state.use_cases


def _not_found(task_id: str) -> HTTPException:
    logger.warning("Task %s not found", task_id)
    return HTTPException(status_code=404, detail="Task not found")


@router.get("/health")
async def health(use_cases: TaskUseCases = Depends(get_use_cases)):
    return {"status": "ok", "tasks": use_cases.count_tasks()}


@router.get("/tasks", response_model=List[TaskResponse])
async def get_all_tasks(use_cases: TaskUseCases = Depends(get_use_cases)):
    return [TaskResponse.from_task(task) for task in use_cases.get_all_tasks()]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    task = use_cases.get_task(task_id)
    if not task:
        raise _not_found(task_id)
    return TaskResponse.from_task(task)


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, use_cases: TaskUseCases = Depends(get_use_cases)):
    created_task = use_cases.create_task(
        title=task.title,
        description=task.description,
        priority=task.priority,
        completed=task.completed,
        due_date=task.due_date,
    )
    return TaskResponse.from_task(created_task)


@router.patch("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str, task: TaskUpdate, use_cases: TaskUseCases = Depends(get_use_cases)
):
    updated_task = use_cases.update_task(task_id, task.changes())
    if not updated_task:
        raise _not_found(task_id)
    return TaskResponse.from_task(updated_task)


@router.delete("/tasks/{task_id}", response_model=DeleteResponse)
async def delete_task(task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)):
    if not use_cases.delete_task(task_id):
        raise _not_found(task_id)
    return DeleteResponse(deleted=True)


@router.put("/tasks/{task_id}/toggle-complete", response_model=TaskResponse)
async def toggle_task_completion(
    task_id: str, use_cases: TaskUseCases = Depends(get_use_cases)
):
    updated_task = use_cases.toggle_task_completion(task_id)
    if not updated_task:
        raise _not_found(task_id)
    logger.info("Task %s toggled to completed = %s", task_id, updated_task.completed)
    return TaskResponse.from_task(updated_task)
