from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from schemas.financial import FinancialSummary
from schemas.inventory import InventoryItem
from schemas.producer import Producer
from schemas.task import Task

class ActivityItem(BaseModel):
    id: str
    type: str
    label: str
    detail: str
    date: datetime
    is_income: Optional[bool] = None

class DashboardOverview(BaseModel):
    producer: Producer
    financial_summary: Optional[FinancialSummary] = None
    stock_items: List[InventoryItem]
    open_tasks: List[Task]
    activity: List[ActivityItem]
