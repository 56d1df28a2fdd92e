from pydantic import BaseModel, Field, condecimal
from typing import Literal, Optional
from datetime import datetime
from decimal import Decimal
from schemas.financial import Transaction

class InventoryItemBase(BaseModel):
    product_name: str = Field(min_length=1)
    unit: str = Field(min_length=1)

class InventoryItemCreate(InventoryItemBase):
    quantity: condecimal(max_digits=15, decimal_places=3, ge=0) = Decimal("0")
    buying_price: Optional[condecimal(max_digits=15, decimal_places=2, ge=0)] = None
    selling_price: Optional[condecimal(max_digits=15, decimal_places=2, ge=0)] = None

class InventoryItemUpdate(BaseModel):
    product_name: Optional[str] = Field(None, min_length=1)
    unit: Optional[str] = Field(None, min_length=1)

class InventoryItem(InventoryItemBase):
    id: int
    quantity: Decimal
    buying_price: Optional[Decimal] = None
    selling_price: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    last_reason: Optional[str] = None

    class Config:
        from_attributes = True

class LedgerEntry(BaseModel):
    id: int
    inventory_id: int
    product_name: Optional[str] = None
    amount: Decimal
    reason: str
    transaction_id: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class MovementCreate(BaseModel):
    product_name: str = Field(min_length=1)
    direction: Literal["add", "subtract"]
    quantity: condecimal(max_digits=15, decimal_places=3, gt=0)
    unit: str = Field(min_length=1)
    reason: str = Field(min_length=1)
    unit_price: Optional[condecimal(max_digits=15, decimal_places=2, ge=0)] = None
    client_id: Optional[int] = None

class ConvertedQuantity(BaseModel):
    quantity: Decimal
    unit: str

class MovementResult(BaseModel):
    item: InventoryItem
    ledger_entry: LedgerEntry
    transaction: Optional[Transaction] = None
    converted_from: Optional[ConvertedQuantity] = None
    warning: Optional[str] = None

class UnitOption(BaseModel):
    key: str
    label: str
    type: str
