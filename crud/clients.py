from sqlalchemy.orm import Session
from typing import List, Optional
from models.client import Client
from schemas.client import ClientCreate, ClientUpdate


class ClientNotFoundError(ValueError):
    pass


def create_client(db: Session, owner_id: str, client: ClientCreate) -> Client:
    db_client = Client(producer_id=owner_id, **client.model_dump())
    db.add(db_client)
    db.commit()
    db.refresh(db_client)
    return db_client

def get_client(db: Session, owner_id: str, client_id: int) -> Optional[Client]:
    return db.query(Client).filter(
        Client.id == client_id,
        Client.producer_id == owner_id
    ).first()

def get_clients(db: Session, owner_id: str, skip: int = 0, limit: int = 100, search: Optional[str] = None) -> List[Client]:
    query = db.query(Client).filter(Client.producer_id == owner_id)

    if search:
        query = query.filter(Client.name.ilike(f'%{search}%'))

    return query.order_by(Client.name).offset(skip).limit(limit).all()

def update_client(db: Session, owner_id: str, client_id: int, client_update: ClientUpdate) -> Optional[Client]:
    db_client = get_client(db, owner_id, client_id)
    if db_client:
        update_data = client_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_client, field, value)
        db.commit()
        db.refresh(db_client)
    return db_client

def delete_clients(db: Session, owner_id: str, client_ids: List[int]) -> int:
    clients = db.query(Client).filter(
        Client.producer_id == owner_id,
        Client.id.in_(client_ids)
    ).all()

    for client in clients:
        db.delete(client)
    db.commit()
    return len(clients)
