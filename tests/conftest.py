"""
Pytest Fixtures für die Platzbuchung.

Fixtures sind wiederverwendbare Setup-Funktionen für Tests.
Sie werden automatisch von pytest erkannt und injiziert.
"""
import os

# Muss vor dem Import der App gesetzt sein, Settings liest beim Import
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from uuid import uuid4

from app.main import app
from app.database import Base, get_db
from app.models import Office, Area, Row, Seat, Employee, User, ScheduledSeat
from app.utils.security import hash_password


# ============ DATENBANK SETUP ============

# SQLite im Speicher, StaticPool damit alle Sessions dieselbe Verbindung nutzen
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ============ BASIS FIXTURES ============

@pytest.fixture(scope="function")
def db():
    """
    Erstellt eine frische Datenbank für jeden Test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """
    FastAPI TestClient mit überschriebener Datenbank.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============ STAMMDATEN FIXTURES ============

@pytest.fixture
def office(db):
    """Büro 1 mit einem Bereich und einer Reihe"""
    office = Office(id=uuid4(), number=1, name="Hauptbüro")
    db.add(office)
    db.commit()
    db.refresh(office)
    return office


@pytest.fixture
def row(db, office):
    area = Area(id=uuid4(), number=1, name="Open Space", office_id=office.id)
    db.add(area)
    db.flush()
    row = Row(id=uuid4(), number=1, name="Fensterreihe", area_id=area.id)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture
def seat_101(db, row):
    seat = Seat(id=uuid4(), number=101, description="Fensterplatz", row_id=row.id)
    db.add(seat)
    db.commit()
    db.refresh(seat)
    return seat


@pytest.fixture
def seat_102(db, row):
    seat = Seat(id=uuid4(), number=102, description="Gangplatz", row_id=row.id)
    db.add(seat)
    db.commit()
    db.refresh(seat)
    return seat


@pytest.fixture
def employee_anna(db):
    employee = Employee(id=uuid4(), first_name="Anna", last_name="Schmidt", email="anna@test.com")
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


@pytest.fixture
def employee_ben(db):
    employee = Employee(id=uuid4(), first_name="Ben", last_name="Weber", email="ben@test.com")
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


# ============ USER FIXTURES ============

@pytest.fixture
def anna_user(db, employee_anna):
    """User für Anna (Passwort: annapass123)"""
    user = User(
        id=uuid4(),
        employee_id=employee_anna.id,
        password_hash=hash_password("annapass123")
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def anna_token(client, anna_user):
    """Login als Anna, gibt Token zurück"""
    response = client.post("/auth/login", json={
        "email": "anna@test.com",
        "password": "annapass123"
    })
    assert response.status_code == 200, f"Login failed: {response.json()}"
    return response.json()["access_token"]


# ============ BUCHUNGS FIXTURES ============

@pytest.fixture
def base_day():
    """Ein Tag in der Zukunft, damit Buchungen nie in der Vergangenheit liegen"""
    return date.today() + timedelta(days=10)


@pytest.fixture
def anna_on_101(db, seat_101, employee_anna, base_day):
    """Anna sitzt an Platz 101 von base_day bis base_day + 2"""
    scheduled = ScheduledSeat(
        id=uuid4(),
        seat_id=seat_101.id,
        employee_id=employee_anna.id,
        start_date=base_day,
        end_date=base_day + timedelta(days=2)
    )
    db.add(scheduled)
    db.commit()
    db.refresh(scheduled)
    return scheduled


# ============ HELPER FUNKTIONEN ============

def auth_header(token: str) -> dict:
    """Erstellt Authorization Header"""
    return {"Authorization": f"Bearer {token}"}
