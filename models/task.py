from sqlalchemy import Column, Integer, String, Date, DateTime, Enum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from enum import Enum as PyEnum
from database import Base

class TaskPriority(PyEnum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"

class TaskStatus(PyEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    producer_id = Column(String, ForeignKey("producers.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    priority = Column(Enum(TaskPriority), nullable=False, default=TaskPriority.NORMAL)
    status = Column(Enum(TaskStatus), nullable=False, default=TaskStatus.PENDING)
    assigned_to = Column(String, ForeignKey("producers.id"), nullable=True, index=True)
    due_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    assignee = relationship("Producer", foreign_keys=[assigned_to])
