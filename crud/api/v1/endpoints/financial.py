from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from database import get_db
from schemas.financial import Transaction, TransactionCreate, FinancialSummary
from models.financial import TransactionType
from crud import financial
from crud.api.v1.deps import get_owner_id

router = APIRouter()

@router.post("/transactions/", response_model=Transaction)
def create_transaction(
    transaction: TransactionCreate,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    try:
        return financial.create_transaction(db, owner_id, transaction)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.get("/transactions/", response_model=List[Transaction])
def list_transactions(skip: int = 0,
    limit: int = 100,
    transaction_type: Optional[TransactionType] = None,
    category: Optional[str] = None,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db)):
    transactions = financial.get_transactions(
        db,
        owner_id,
        skip=skip,
        limit=limit,
        transaction_type=transaction_type,
        category=category
    )
    return transactions

@router.get("/transactions/summary", response_model=FinancialSummary)
def get_summary(owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return financial.summarize_finances(db, owner_id)

@router.get("/transactions/{transaction_id}", response_model=Transaction)
def get_transaction(transaction_id: int, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    db_transaction = financial.get_transaction(db, owner_id, transaction_id)
    if db_transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return db_transaction

@router.delete("/transactions/")
def delete_transactions(ids: List[int] = Query(...), owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    deleted = financial.delete_transactions(db, owner_id, ids)
    return {"status": "success", "deleted": deleted}
