import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from models.producer import Producer, ProducerRole
from schemas.producer import ProducerUpsert

logger = logging.getLogger(__name__)


class PermissionDeniedError(ValueError):
    pass


def get_producer(db: Session, producer_id: str) -> Optional[Producer]:
    return db.query(Producer).filter(Producer.id == producer_id).first()

def resolve_owner_id(producer: Producer) -> str:
    """Employees work on their employer's data, everyone else on their own."""
    if producer.role == ProducerRole.EMPLOYEE and producer.employer_id:
        return producer.employer_id
    return producer.id

def ensure_producer(db: Session, producer_id: str, profile: ProducerUpsert) -> Producer:
    update_data = profile.model_dump(exclude_unset=True, exclude_none=True)

    employer_id = update_data.get("employer_id")
    if employer_id:
        if employer_id == producer_id:
            raise ValueError("A producer cannot be its own employer")
        employer = get_producer(db, employer_id)
        if employer is None or employer.role != ProducerRole.COMPANY:
            raise ValueError(f"Employer {employer_id} not found")

    db_producer = get_producer(db, producer_id)
    if db_producer is None:
        db_producer = Producer(
            id=producer_id,
            name="User",
            surname="Producer",
            company_name="My Farm",
            role=ProducerRole.COMPANY,
        )
        db.add(db_producer)
        logger.info("creating profile for producer %s", producer_id)

    for field, value in update_data.items():
        setattr(db_producer, field, value)

    db.commit()
    db.refresh(db_producer)
    return db_producer

def list_employees(db: Session, company_id: str) -> List[Producer]:
    return db.query(Producer).filter(
        Producer.employer_id == company_id,
        Producer.role == ProducerRole.EMPLOYEE
    ).order_by(Producer.name).all()
