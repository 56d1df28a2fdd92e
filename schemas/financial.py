from pydantic import BaseModel, Field, condecimal
from datetime import datetime
from typing import Optional
from decimal import Decimal
from models.financial import TransactionType


class TransactionCreate(BaseModel):
    transaction_type: TransactionType
    category: str = Field(min_length=1)
    amount: condecimal(max_digits=15, decimal_places=2, gt=0)
    description: Optional[str] = None
    inventory_id: Optional[int] = None
    client_id: Optional[int] = None

class Transaction(TransactionCreate):
    id: int
    amount: Decimal
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class FinancialSummary(BaseModel):
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    transaction_count: int
    currency: str
