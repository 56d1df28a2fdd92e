from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List
from database import get_db
from schemas.task import Task, TaskCreate, TaskStatusUpdate
from crud import tasks
from crud.producers import PermissionDeniedError
from crud.api.v1.deps import get_current_producer

router = APIRouter()

@router.post("/", response_model=Task)
def create_task(task: TaskCreate, producer=Depends(get_current_producer), db: Session = Depends(get_db)):
    try:
        return tasks.create_task(db, producer, task)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/", response_model=List[Task])
def list_tasks(include_done: bool = True, producer=Depends(get_current_producer), db: Session = Depends(get_db)):
    return tasks.get_tasks(db, producer, include_done=include_done)

@router.patch("/{task_id}/status", response_model=Task)
def update_task_status(task_id: int, update: TaskStatusUpdate, producer=Depends(get_current_producer), db: Session = Depends(get_db)):
    db_task = tasks.update_task_status(db, producer, task_id, update.status)
    if db_task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return db_task

@router.delete("/")
def delete_tasks(ids: List[int] = Query(...), producer=Depends(get_current_producer), db: Session = Depends(get_db)):
    try:
        deleted = tasks.delete_tasks(db, producer, ids)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return {"status": "success", "deleted": deleted}
