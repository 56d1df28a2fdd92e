from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from database import get_db
from schemas.client import Client, ClientCreate, ClientUpdate
from crud import clients
from crud.api.v1.deps import get_owner_id

router = APIRouter()

@router.post("/", response_model=Client)
def create_client(client: ClientCreate, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return clients.create_client(db, owner_id, client)

@router.get("/", response_model=List[Client])
def list_clients(skip: int = 0, limit: int = 100, search: Optional[str] = None, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return clients.get_clients(db, owner_id, skip, limit, search)

@router.delete("/")
def delete_clients(ids: List[int] = Query(...), owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    deleted = clients.delete_clients(db, owner_id, ids)
    return {"status": "success", "deleted": deleted}

@router.get("/{client_id}", response_model=Client)
def get_client(client_id: int, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    db_client = clients.get_client(db, owner_id, client_id)
    if db_client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return db_client

@router.put("/{client_id}", response_model=Client)
def update_client(client_id: int, client_update: ClientUpdate, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    db_client = clients.update_client(db, owner_id, client_id, client_update)
    if db_client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return db_client
