import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ANTHROPIC_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from database import Base, SessionLocal, engine
import models  # noqa: F401
from models.producer import Producer, ProducerRole


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    from main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def company(db):
    producer = Producer(id="farm-1", name="Anna", surname="Berg", company_name="Berg Farm", role=ProducerRole.COMPANY)
    db.add(producer)
    db.commit()
    return producer


@pytest.fixture
def employee(db, company):
    producer = Producer(id="worker-1", name="Ben", role=ProducerRole.EMPLOYEE, employer_id=company.id)
    db.add(producer)
    db.commit()
    return producer


@pytest.fixture
def other_company(db):
    producer = Producer(id="farm-2", name="Carl", role=ProducerRole.COMPANY)
    db.add(producer)
    db.commit()
    return producer
