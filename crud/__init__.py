from .financial import create_transaction, get_transaction, get_transactions, delete_transactions, summarize_finances
from .inventory import create_inventory_item, get_inventory_item, get_inventory_items, record_movement, get_ledger_entries
from .producers import get_producer, ensure_producer, resolve_owner_id
