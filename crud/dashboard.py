from sqlalchemy.orm import Session
from crud import financial, inventory, tasks
from crud.producers import resolve_owner_id
from models.producer import Producer, ProducerRole


def get_dashboard_data(db: Session, producer: Producer) -> dict:
    owner_id = resolve_owner_id(producer)
    is_employee = producer.role == ProducerRole.EMPLOYEE

    stock_items = inventory.get_recent_inventory_items(db, owner_id, limit=5)
    open_tasks = tasks.get_tasks(db, producer, include_done=False, limit=5)
    recent_transactions = financial.get_transactions(db, owner_id, limit=4)

    activity = [
        {
            "id": f"transaction-{t.id}",
            "type": "transaction",
            "label": f"{t.transaction_type.value.capitalize()}: {t.category}",
            "detail": t.description or f"{t.amount}",
            "date": t.created_at,
            "is_income": t.transaction_type.value == "income",
        }
        for t in recent_transactions
    ]
    activity += [
        {
            "id": f"stock-{item.id}",
            "type": "stock",
            "label": f"Stock update: {item.product_name}",
            "detail": f"{item.quantity} {item.unit}",
            "date": item.last_updated,
            "is_income": None,
        }
        for item in stock_items[:2]
    ]
    activity = [a for a in activity if a["date"] is not None]
    activity.sort(key=lambda a: a["date"].replace(tzinfo=None), reverse=True)

    return {
        "producer": producer,
        "financial_summary": None if is_employee else financial.summarize_finances(db, owner_id),
        "stock_items": stock_items,
        "open_tasks": open_tasks,
        "activity": activity[:5],
    }
