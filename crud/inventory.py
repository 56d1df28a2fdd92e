import logging
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from config import settings
from crud import financial
from crud.clients import get_client, ClientNotFoundError
from models.inventory import InventoryItem, LedgerEntry
from schemas.inventory import InventoryItemCreate, InventoryItemUpdate, MovementCreate
from utils.conversions import convert_unit, get_unit

logger = logging.getLogger(__name__)

QUANTITY_STEP = Decimal("0.001")
PRICE_STEP = Decimal("0.000001")


class ProductNotFoundError(ValueError):
    pass

class InsufficientStockError(ValueError):
    pass

class DuplicateProductError(ValueError):
    pass

class QuantityTooSmallError(ValueError):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _same_unit(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()

def find_inventory_item(db: Session, owner_id: str, product_name: str) -> Optional[InventoryItem]:
    """Case-insensitive lookup; the oldest item wins when names collide."""
    return db.query(InventoryItem).filter(
        InventoryItem.producer_id == owner_id,
        func.lower(InventoryItem.product_name) == product_name.strip().lower()
    ).order_by(InventoryItem.created_at, InventoryItem.id).first()

def create_inventory_item(db: Session, owner_id: str, item: InventoryItemCreate) -> InventoryItem:
    if find_inventory_item(db, owner_id, item.product_name):
        raise DuplicateProductError(f"Product '{item.product_name}' already exists")

    item_data = item.model_dump()
    item_data["product_name"] = item.product_name.strip()
    db_item = InventoryItem(producer_id=owner_id, last_updated=_utcnow(), **item_data)
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item

def get_inventory_item(db: Session, owner_id: str, item_id: int) -> Optional[InventoryItem]:
    return db.query(InventoryItem).filter(
        InventoryItem.id == item_id,
        InventoryItem.producer_id == owner_id
    ).first()

def get_inventory_items(db: Session, owner_id: str, skip: int = 0, limit: int = 100, search: Optional[str] = None) -> List[InventoryItem]:
    query = db.query(InventoryItem).filter(InventoryItem.producer_id == owner_id)

    if search:
        query = query.filter(InventoryItem.product_name.ilike(f'%{search}%'))

    return query.order_by(InventoryItem.product_name).offset(skip).limit(limit).all()

def get_recent_inventory_items(db: Session, owner_id: str, limit: int = 5) -> List[InventoryItem]:
    return db.query(InventoryItem).filter(
        InventoryItem.producer_id == owner_id
    ).order_by(InventoryItem.last_updated.desc(), InventoryItem.id.desc()).limit(limit).all()

def update_inventory_item(db: Session, owner_id: str, item_id: int, item_update: InventoryItemUpdate) -> Optional[InventoryItem]:
    db_item = get_inventory_item(db, owner_id, item_id)
    if db_item is None:
        return None

    update_data = item_update.model_dump(exclude_unset=True, exclude_none=True)
    new_name = update_data.get("product_name")
    if new_name:
        update_data["product_name"] = new_name.strip()
        existing = find_inventory_item(db, owner_id, new_name)
        if existing is not None and existing.id != db_item.id:
            raise DuplicateProductError(f"Product '{new_name}' already exists")

    for key, value in update_data.items():
        setattr(db_item, key, value)
    db_item.last_updated = _utcnow()
    db.commit()
    db.refresh(db_item)
    return db_item

def delete_inventory_items(db: Session, owner_id: str, item_ids: List[int]) -> int:
    items = db.query(InventoryItem).filter(
        InventoryItem.producer_id == owner_id,
        InventoryItem.id.in_(item_ids)
    ).all()

    for item in items:
        db.delete(item)
    db.commit()
    return len(items)

def get_ledger_entries(db: Session, owner_id: str, limit: int = 10, inventory_id: Optional[int] = None) -> List[LedgerEntry]:
    query = db.query(LedgerEntry).join(InventoryItem).filter(InventoryItem.producer_id == owner_id)

    if inventory_id is not None:
        query = query.filter(LedgerEntry.inventory_id == inventory_id)

    return query.order_by(LedgerEntry.created_at.desc(), LedgerEntry.id.desc()).limit(limit).all()

def record_movement(db: Session, owner_id: str, movement: MovementCreate) -> dict:
    """
    Log a stock movement for one product.

    Finds (or, for additions, creates) the inventory item, converts the
    quantity into the item's unit, applies the signed delta and appends a
    ledger entry. A unit price also produces a financial transaction that is
    linked back to the ledger entry: a sale for subtractions, a purchase for
    additions.

    When the transaction cannot be written the stock change is kept and the
    result carries a warning, unless STRICT_MOVEMENT_TRANSACTIONS is set, in
    which case the whole movement is rolled back.
    """
    is_add = movement.direction == "add"
    input_quantity = Decimal(movement.quantity)
    input_unit = movement.unit.strip()
    unit_price = Decimal(movement.unit_price) if movement.unit_price is not None else None

    if movement.client_id is not None and get_client(db, owner_id, movement.client_id) is None:
        raise ClientNotFoundError(f"Client with ID {movement.client_id} not found")

    db_item = find_inventory_item(db, owner_id, movement.product_name)
    converted_from = None
    reason = movement.reason.strip()
    item_price = unit_price

    if db_item is None:
        if not is_add:
            raise ProductNotFoundError(f"Product '{movement.product_name}' not found in inventory")
        quantity = input_quantity.quantize(QUANTITY_STEP)
        current = Decimal("0")
    else:
        quantity = input_quantity
        if not _same_unit(db_item.unit, input_unit):
            source, target = get_unit(input_unit), get_unit(db_item.unit)
            if source is None or target is None or source.type != target.type:
                logger.warning(
                    "cannot convert %s to %s for '%s', applying the amount as is",
                    input_unit, db_item.unit, db_item.product_name
                )
            quantity = convert_unit(input_quantity, input_unit, db_item.unit)
            if unit_price is not None:
                item_price = convert_unit(unit_price, db_item.unit, input_unit).quantize(PRICE_STEP)
            converted_from = {"quantity": input_quantity, "unit": input_unit}
            reason = f"{reason} (logged as {input_quantity} {input_unit})"
            logger.info(
                "converted %s %s to %s %s",
                input_quantity, input_unit, quantity, db_item.unit
            )
        quantity = quantity.quantize(QUANTITY_STEP)
        current = Decimal(db_item.quantity)

    if quantity == 0:
        unit = db_item.unit if db_item is not None else input_unit
        raise QuantityTooSmallError(
            f"Quantity {input_quantity} {input_unit} is too small for unit {unit}"
        )

    delta = quantity if is_add else -quantity
    if current + delta < 0:
        raise InsufficientStockError(
            f"Insufficient stock for '{movement.product_name}': {current} available, {quantity} requested"
        )

    strict = settings.STRICT_MOVEMENT_TRANSACTIONS
    now = _utcnow()

    try:
        if db_item is None:
            db_item = InventoryItem(
                producer_id=owner_id,
                product_name=movement.product_name.strip(),
                quantity=quantity,
                unit=input_unit,
                buying_price=item_price,
                last_updated=now,
            )
            db.add(db_item)
            db.flush()
        else:
            db_item.quantity = current + delta
            db_item.last_updated = now
            if item_price is not None:
                if is_add:
                    db_item.buying_price = item_price
                else:
                    db_item.selling_price = item_price

        db_entry = LedgerEntry(inventory_id=db_item.id, amount=delta, reason=reason)
        db.add(db_entry)
        if strict:
            db.flush()
        else:
            db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(
        "recorded %s of %s %s for '%s' (owner %s)",
        movement.direction, quantity, db_item.unit, db_item.product_name, owner_id
    )

    db_transaction = None
    warning = None
    if unit_price is not None:
        try:
            db_transaction = financial.build_movement_transaction(
                owner_id=owner_id,
                direction=movement.direction,
                reason=movement.reason.strip(),
                product_name=db_item.product_name,
                quantity=input_quantity,
                unit=input_unit,
                unit_price=unit_price,
                inventory_id=db_item.id,
                client_id=movement.client_id,
            )
            db.add(db_transaction)
            db.flush()
            db_entry.transaction_id = db_transaction.id
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            if strict:
                logger.error("movement for '%s' rolled back: %s", movement.product_name, e)
                raise
            db_transaction = None
            warning = "Stock updated, but the linked financial transaction could not be recorded"
            logger.warning("%s: %s", warning, e)
    elif strict:
        db.commit()

    db.refresh(db_item)
    db.refresh(db_entry)
    if db_transaction is not None:
        db.refresh(db_transaction)

    return {
        "item": db_item,
        "ledger_entry": db_entry,
        "transaction": db_transaction,
        "converted_from": converted_from,
        "warning": warning,
    }
