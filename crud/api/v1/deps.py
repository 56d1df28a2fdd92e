from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session
from database import get_db
from crud.producers import get_producer, resolve_owner_id
from models.producer import Producer


def get_producer_id(x_producer_id: str = Header(None)) -> str:
    if not x_producer_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_producer_id

def get_current_producer(
    producer_id: str = Depends(get_producer_id),
    db: Session = Depends(get_db)
) -> Producer:
    producer = get_producer(db, producer_id)
    if producer is None:
        raise HTTPException(status_code=404, detail="Producer profile not found")
    return producer

def get_owner_id(producer: Producer = Depends(get_current_producer)) -> str:
    return resolve_owner_id(producer)
