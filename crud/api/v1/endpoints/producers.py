from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from database import get_db
from schemas.producer import Producer, ProducerUpsert
from crud import producers
from crud.api.v1.deps import get_current_producer, get_producer_id

router = APIRouter()

@router.put("/me", response_model=Producer)
def upsert_profile(
    profile: ProducerUpsert,
    producer_id: str = Depends(get_producer_id),
    db: Session = Depends(get_db)
):
    try:
        return producers.ensure_producer(db, producer_id, profile)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/me", response_model=Producer)
def get_profile(producer=Depends(get_current_producer)):
    return producer

@router.get("/me/employees", response_model=List[Producer])
def list_employees(producer=Depends(get_current_producer), db: Session = Depends(get_db)):
    return producers.list_employees(db, producer.id)
