from .producer import Producer, ProducerUpsert
from .financial import Transaction, TransactionCreate, FinancialSummary
from .inventory import (
    InventoryItem, InventoryItemCreate, InventoryItemUpdate,
    LedgerEntry, MovementCreate, MovementResult, UnitOption
)
from .client import Client, ClientCreate, ClientUpdate
from .task import Task, TaskCreate, TaskStatusUpdate
from .dashboard import ActivityItem, DashboardOverview
