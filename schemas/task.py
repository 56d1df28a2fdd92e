from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime
from models.task import TaskPriority, TaskStatus

class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.NORMAL
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None

class TaskStatusUpdate(BaseModel):
    status: TaskStatus

class Task(TaskCreate):
    id: int
    producer_id: str
    status: TaskStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
