from decimal import Decimal
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List, Optional
from config import settings
from models.financial import Transaction, TransactionType
from models.inventory import InventoryItem, LedgerEntry
from models.client import Client
from schemas.financial import TransactionCreate

SALES_CATEGORY = "sales"
PURCHASES_CATEGORY = "purchases"


def create_transaction(db: Session, owner_id: str, transaction: TransactionCreate) -> Transaction:
    transaction_data = transaction.model_dump()

    inventory_id = transaction_data.get('inventory_id')
    if inventory_id is not None:
        item = db.query(InventoryItem).filter(
            InventoryItem.id == inventory_id,
            InventoryItem.producer_id == owner_id
        ).first()
        if not item:
            raise ValueError(f"Inventory item with ID {inventory_id} not found")

    client_id = transaction_data.get('client_id')
    if client_id is not None:
        client = db.query(Client).filter(
            Client.id == client_id,
            Client.producer_id == owner_id
        ).first()
        if not client:
            raise ValueError(f"Client with ID {client_id} not found")

    db_transaction = Transaction(producer_id=owner_id, **transaction_data)
    db.add(db_transaction)
    db.commit()
    db.refresh(db_transaction)
    return db_transaction

def build_movement_transaction(
    owner_id: str,
    direction: str,
    reason: str,
    product_name: str,
    quantity: Decimal,
    unit: str,
    unit_price: Decimal,
    inventory_id: int,
    client_id: Optional[int] = None,
) -> Transaction:
    """Transaction for a priced stock movement: sales are income, additions are purchases."""
    if direction == "subtract":
        transaction_type, category = TransactionType.INCOME, SALES_CATEGORY
    else:
        transaction_type, category = TransactionType.EXPENSE, PURCHASES_CATEGORY

    amount = (quantity * unit_price).quantize(Decimal("0.01"))
    description = f"{reason}: {quantity.normalize():f} {unit} of {product_name} @ {unit_price}/{unit}"

    return Transaction(
        producer_id=owner_id,
        transaction_type=transaction_type,
        category=category,
        amount=amount,
        description=description,
        inventory_id=inventory_id,
        client_id=client_id,
    )

def get_transaction(db: Session, owner_id: str, transaction_id: int) -> Optional[Transaction]:
    return db.query(Transaction).filter(
        Transaction.id == transaction_id,
        Transaction.producer_id == owner_id
    ).first()

def get_transactions(db: Session,
    owner_id: str,
    skip: int = 0,
    limit: int = 100,
    transaction_type: Optional[TransactionType] = None,
    category: Optional[str] = None) -> List[Transaction]:
    query = db.query(Transaction).filter(Transaction.producer_id == owner_id)

    if transaction_type:
        query = query.filter(Transaction.transaction_type == transaction_type)
    if category:
        query = query.filter(Transaction.category == category)

    return query.order_by(Transaction.created_at.desc(), Transaction.id.desc()).offset(skip).limit(limit).all()

def delete_transactions(db: Session, owner_id: str, transaction_ids: List[int]) -> int:
    transactions = db.query(Transaction).filter(
        Transaction.producer_id == owner_id,
        Transaction.id.in_(transaction_ids)
    ).all()
    if not transactions:
        return 0

    ids = [t.id for t in transactions]
    db.query(LedgerEntry).filter(LedgerEntry.transaction_id.in_(ids)).update(
        {LedgerEntry.transaction_id: None}, synchronize_session=False
    )
    for db_transaction in transactions:
        db.delete(db_transaction)
    db.commit()
    return len(transactions)

def summarize_finances(db: Session, owner_id: str) -> dict:
    base = db.query(Transaction).filter(Transaction.producer_id == owner_id)

    income = base.filter(
        Transaction.transaction_type == TransactionType.INCOME
    ).with_entities(func.sum(Transaction.amount)).scalar() or Decimal("0")

    expenses = base.filter(
        Transaction.transaction_type == TransactionType.EXPENSE
    ).with_entities(func.sum(Transaction.amount)).scalar() or Decimal("0")

    count = base.count()

    income = Decimal(income)
    expenses = Decimal(expenses)
    return {
        "total_income": income,
        "total_expenses": expenses,
        "net_profit": income - expenses,
        "transaction_count": count,
        "currency": settings.CURRENCY,
    }
