from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from database import get_db
from schemas.inventory import (
    InventoryItem, InventoryItemCreate, InventoryItemUpdate,
    LedgerEntry, MovementCreate, MovementResult, UnitOption
)
from crud import inventory
from crud.clients import ClientNotFoundError
from crud.api.v1.deps import get_owner_id
from utils.conversions import UNIT_MAP

router = APIRouter()

@router.get("/units", response_model=List[UnitOption])
def list_units():
    return [
        {"key": key, "label": info.label, "type": info.type.value}
        for key, info in UNIT_MAP.items()
    ]

@router.post("/movements", response_model=MovementResult)
def record_movement(
    movement: MovementCreate,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    try:
        return inventory.record_movement(db, owner_id, movement)
    except (inventory.ProductNotFoundError, ClientNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (inventory.InsufficientStockError, inventory.QuantityTooSmallError) as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/ledger", response_model=List[LedgerEntry])
def list_ledger_entries(
    limit: int = Query(10, ge=1, le=500),
    inventory_id: Optional[int] = None,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return inventory.get_ledger_entries(db, owner_id, limit=limit, inventory_id=inventory_id)

@router.post("/", response_model=InventoryItem)
def create_inventory_item(item: InventoryItemCreate, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    try:
        return inventory.create_inventory_item(db, owner_id, item)
    except inventory.DuplicateProductError as e:
        raise HTTPException(status_code=409, detail=str(e))

@router.get("/", response_model=List[InventoryItem])
def list_inventory_items(skip: int = 0, limit: int = 100, search: Optional[str] = None, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return inventory.get_inventory_items(db, owner_id, skip, limit, search)

@router.delete("/")
def delete_inventory_items(ids: List[int] = Query(...), owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    deleted = inventory.delete_inventory_items(db, owner_id, ids)
    return {"status": "success", "deleted": deleted}

@router.get("/{item_id}", response_model=InventoryItem)
def get_inventory_item(item_id: int, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    db_item = inventory.get_inventory_item(db, owner_id, item_id)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    return db_item

@router.put("/{item_id}", response_model=InventoryItem)
def update_inventory_item(item_id: int, item_update: InventoryItemUpdate, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    try:
        db_item = inventory.update_inventory_item(db, owner_id, item_id, item_update)
    except inventory.DuplicateProductError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if db_item is None:
        raise HTTPException(status_code=404, detail="Inventory item is not found")
    return db_item
