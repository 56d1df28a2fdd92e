from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from models.producer import ProducerRole

class ProducerUpsert(BaseModel):
    name: Optional[str] = None
    surname: Optional[str] = None
    company_name: Optional[str] = None
    produce: Optional[str] = None
    location: Optional[str] = None
    num_employees: Optional[int] = None
    role: Optional[ProducerRole] = None
    employer_id: Optional[str] = None

class Producer(BaseModel):
    id: str
    name: str
    surname: Optional[str] = None
    company_name: Optional[str] = None
    produce: Optional[str] = None
    location: Optional[str] = None
    num_employees: Optional[int] = None
    role: ProducerRole
    employer_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
