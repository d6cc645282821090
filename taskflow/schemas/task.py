from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskflow.domain.entities import Priority, Task


def _non_empty_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("title must not be empty")
    return value


class TaskCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return _non_empty_title(value)


class TaskUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied;
    id and createdAt are not part of the model and are dropped if sent."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            raise ValueError("title must not be null")
        return _non_empty_title(value)

    @field_validator("priority", "completed")
    @classmethod
    def check_not_null(cls, value):
        if value is None:
            raise ValueError("field must not be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = None
    priority: Priority
    completed: bool
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority,
            completed=task.completed,
            due_date=task.due_date,
            created_at=task.created_at,
        )

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            priority=self.priority,
            completed=self.completed,
            due_date=self.due_date,
            created_at=self.created_at,
        )


class DeleteResponse(BaseModel):
    deleted: bool
