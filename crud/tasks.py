from sqlalchemy.orm import Session
from typing import List, Optional
from crud.producers import PermissionDeniedError
from models.producer import Producer, ProducerRole
from models.task import Task, TaskStatus
from schemas.task import TaskCreate


def _is_company(producer: Producer) -> bool:
    return producer.role == ProducerRole.COMPANY

def create_task(db: Session, producer: Producer, task: TaskCreate) -> Task:
    if not _is_company(producer):
        raise PermissionDeniedError("Only company accounts can create tasks")

    if task.assigned_to:
        assignee = db.query(Producer).filter(
            Producer.id == task.assigned_to,
            Producer.employer_id == producer.id
        ).first()
        if not assignee:
            raise ValueError(f"Employee {task.assigned_to} not found")

    task_data = task.model_dump()
    task_data["title"] = task.title.strip()
    task_data["description"] = (task.description or "").strip() or None

    db_task = Task(producer_id=producer.id, status=TaskStatus.PENDING, **task_data)
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    return db_task

def get_tasks(db: Session, producer: Producer, include_done: bool = True, limit: Optional[int] = None) -> List[Task]:
    if _is_company(producer):
        query = db.query(Task).filter(Task.producer_id == producer.id)
    else:
        query = db.query(Task).filter(Task.assigned_to == producer.id)

    if not include_done:
        query = query.filter(Task.status != TaskStatus.DONE)

    query = query.order_by(Task.created_at.desc(), Task.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()

def update_task_status(db: Session, producer: Producer, task_id: int, status: TaskStatus) -> Optional[Task]:
    db_task = db.query(Task).filter(Task.id == task_id).first()
    if db_task is None:
        return None
    if producer.id not in (db_task.producer_id, db_task.assigned_to):
        return None

    db_task.status = status
    db.commit()
    db.refresh(db_task)
    return db_task

def delete_tasks(db: Session, producer: Producer, task_ids: List[int]) -> int:
    if not _is_company(producer):
        raise PermissionDeniedError("Only company accounts can delete tasks")

    tasks = db.query(Task).filter(
        Task.producer_id == producer.id,
        Task.id.in_(task_ids)
    ).all()
    for db_task in tasks:
        db.delete(db_task)
    db.commit()
    return len(tasks)
