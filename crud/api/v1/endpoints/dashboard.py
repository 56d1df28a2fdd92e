from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db
from schemas.dashboard import DashboardOverview
from crud import dashboard
from crud.api.v1.deps import get_current_producer

router = APIRouter()

@router.get("/", response_model=DashboardOverview)
def get_dashboard_overview(producer=Depends(get_current_producer), db: Session = Depends(get_db)):
    """
    Dashboard overview: financial summary (owners only), recently updated
    stock, open tasks and a short activity feed.
    """
    return dashboard.get_dashboard_data(db, producer)
