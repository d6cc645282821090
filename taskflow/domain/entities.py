from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Fields a partial update may overwrite. id and created_at are never merged.
UPDATABLE_FIELDS = ("title", "description", "priority", "completed", "due_date")


@dataclass
class Task:
    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    due_date: Optional[datetime] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
