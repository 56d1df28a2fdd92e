from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, select
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, column_property
from database import Base

class InventoryItem(Base):
    __tablename__ = 'inventory_items'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    producer_id = Column(String, ForeignKey("producers.id"), nullable=False, index=True)
    product_name = Column(String, nullable=False)
    quantity = Column(Numeric(15, 3), nullable=False, default=0)
    unit = Column(String, nullable=False)
    # per unit of `unit`; six places keep prices converted down to g or ml
    buying_price = Column(Numeric(18, 6), nullable=True)
    selling_price = Column(Numeric(18, 6), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_updated = Column(DateTime(timezone=True), server_default=func.now())

    ledger_entries = relationship(
        "LedgerEntry",
        back_populates="inventory_item",
        cascade="all, delete-orphan",
        order_by="LedgerEntry.id",
    )
    transactions = relationship("Transaction", back_populates="inventory_item")


class LedgerEntry(Base):
    __tablename__ = 'inventory_ledger'

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    inventory_id = Column(Integer, ForeignKey("inventory_items.id", ondelete="CASCADE"), nullable=False, index=True)
    # signed, in the unit of the inventory item
    amount = Column(Numeric(15, 3), nullable=False)
    reason = Column(String, nullable=False)
    transaction_id = Column(Integer, ForeignKey("transactions.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    inventory_item = relationship("InventoryItem", back_populates="ledger_entries")
    transaction = relationship("Transaction")

    @property
    def product_name(self):
        return self.inventory_item.product_name if self.inventory_item else None


InventoryItem.last_reason = column_property(
    select(LedgerEntry.reason)
    .where(LedgerEntry.inventory_id == InventoryItem.id)
    .order_by(LedgerEntry.id.desc())
    .limit(1)
    .correlate_except(LedgerEntry)
    .scalar_subquery()
)
