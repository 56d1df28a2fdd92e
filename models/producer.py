from sqlalchemy import Column, String, Integer, DateTime, Enum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, backref
from enum import Enum as PyEnum
from database import Base

class ProducerRole(PyEnum):
    COMPANY = "company"
    EMPLOYEE = "employee"


class Producer(Base):
    __tablename__ = "producers"

    # identity handed over by the auth provider
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=True)
    company_name = Column(String, nullable=True)
    produce = Column(String, nullable=True)
    location = Column(String, nullable=True)
    num_employees = Column(Integer, nullable=True)
    role = Column(Enum(ProducerRole), nullable=False, default=ProducerRole.COMPANY)
    employer_id = Column(String, ForeignKey("producers.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employees = relationship("Producer", backref=backref("employer", remote_side=[id]))
