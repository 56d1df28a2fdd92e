from .producer import Producer, ProducerRole
from .financial import Transaction, TransactionType
from .inventory import InventoryItem, LedgerEntry
from .client import Client
from .task import Task, TaskPriority, TaskStatus
