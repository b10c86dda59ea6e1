"""
Pytest configuration and fixtures for the Pawcademy API tests.

Every test gets a fresh in-memory SQLite database wired into the app through
the get_db dependency override, plus helpers for creating records and
logging in.
"""

import os

# Settings are read at import time; point them at a throwaway database first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from typing import Any, Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import pawcademy.db.models  # noqa: F401
from pawcademy.api.routes.deps import get_db
from pawcademy.core.security import sessions
from pawcademy.db.base import Base
from pawcademy.main import app


def _memory_engine() -> Engine:
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _override_for(engine: Engine) -> Callable[[], Generator[Session, None, None]]:
    testing_session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def _get_db() -> Generator[Session, None, None]:
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory database with all tables created."""
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    """Direct session on the test database, for arranging and inspecting rows."""
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def client(engine: Engine) -> Generator[TestClient, None, None]:
    """API client backed by the per-test database."""
    app.dependency_overrides[get_db] = _override_for(engine)
    sessions.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    sessions.clear()


@pytest.fixture
def broken_client() -> Generator[TestClient, None, None]:
    """
    API client whose database has no tables, so every store call fails.

    Used to exercise the 500 branch of each endpoint.
    """
    engine = _memory_engine()
    app.dependency_overrides[get_db] = _override_for(engine)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    engine.dispose()


# -------------------------
# Payload factories
# -------------------------

@pytest.fixture
def customer_payload() -> Dict[str, Any]:
    return {"firstName": "Amy", "lastName": "Lee", "phoneNum": "555-0100", "address": "12 Bark St"}


@pytest.fixture
def trainer_payload() -> Dict[str, Any]:
    return {"firstName": "Sam", "lastName": "Stone", "phoneNum": "555-0200", "speciality": "Agility"}


@pytest.fixture
def employee_payload() -> Dict[str, Any]:
    return {
        "firstName": "Alex",
        "lastName": "Admin",
        "email": "alex@pawcademy.example",
        "phone": "555-0300",
        "position": "Manager",
        "hireDate": "2021-02-01",
    }


@pytest.fixture
def create(client: TestClient) -> Callable[[str, Dict[str, Any]], Dict[str, Any]]:
    """POST a record and return the stored JSON body."""

    def _create(resource: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = client.post(f"/api/{resource}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def pet_payload_for() -> Callable[[int], Dict[str, Any]]:
    def _payload(customer_id: int) -> Dict[str, Any]:
        return {
            "customerId": customer_id,
            "name": "Biscuit",
            "species": "Dog",
            "birthDate": "2020-05-17",
            "breed": "Beagle",
        }

    return _payload


@pytest.fixture
def class_payload_for() -> Callable[[int], Dict[str, Any]]:
    def _payload(trainer_id: int) -> Dict[str, Any]:
        return {
            "trainerId": trainer_id,
            "classType": "Obedience",
            "title": "Puppy Basics",
            "description": "Sit, stay, come.",
            "location": "Main Hall",
            "startTime": "09:00:00",
            "endTime": "10:30:00",
            "startDate": "2026-11-02",
            "endDate": "2026-12-14",
            "maxCapacity": 8,
            "price": 180.0,
            "category": "Training",
        }

    return _payload


@pytest.fixture
def booking_payload_for() -> Callable[[int, int, int], Dict[str, Any]]:
    def _payload(class_id: int, pet_id: int, employee_id: int) -> Dict[str, Any]:
        return {
            "classId": class_id,
            "petId": pet_id,
            "employeeId": employee_id,
            "bookingDate": "2026-10-20T14:30:00",
            "status": "Confirmed",
            "paymentStatus": "Paid",
            "amountPaid": 180.0,
        }

    return _payload


@pytest.fixture
def login(client: TestClient) -> Callable[[str, str, str], Dict[str, Any]]:
    """Log in and return the response body; asserts success."""

    def _login(first_name: str, last_name: str, phone_number: str) -> Dict[str, Any]:
        response = client.post(
            "/api/Login",
            json={"firstName": first_name, "lastName": last_name, "phoneNumber": phone_number},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _login


@pytest.fixture
def bearer() -> Callable[[str], Dict[str, str]]:
    def _headers(token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    return _headers
