"""
Pytest fixtures for the Landing API tests.
Uses in-memory SQLite and provides seeded users and vacancies.
"""
import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["EXTERNAL_SERVICE_URL"] = ""
os.environ["AWS_ACCESS_KEY_ID"] = ""
os.environ["AWS_SECRET_ACCESS_KEY"] = ""

from landing_backend.app.db.base import Base
from landing_backend.main import app
from landing_backend.app.core.dependencies import get_db
from landing_backend.app.models.user import User
from landing_backend.app.models.vacancy import Vacancy

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so anything opening its own session uses our test engine
import landing_backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient over a fresh schema."""
    return TestClient(app)


@pytest.fixture
def make_vacancy(db_session):
    """Insert a vacancy directly, bypassing the API."""

    def _make(**overrides):
        fields = {
            "job_title": "Desarrollador Backend",
            "slug": "desarrollador-backend",
            "mode": "Remoto",
            "years_experience": 3,
            "short_description": "APIs en Python",
            "description": "Construir y mantener servicios HTTP.",
            "stack_required": ["Python", "FastAPI"],
            "is_active": True,
            "status": "open",
        }
        fields.update(overrides)
        vacancy = Vacancy(**fields)
        db_session.add(vacancy)
        db_session.commit()
        db_session.refresh(vacancy)
        return vacancy

    return _make


@pytest.fixture
def open_vacancy(make_vacancy):
    return make_vacancy()


@pytest.fixture
def test_user(db_session):
    """A user row without its default card/curriculum (inserted directly)."""
    user = User(
        first_name="Ana",
        last_name="García",
        email="ana@example.com",
        role="Ingeniera de software",
        slug="ana-garcia",
        image="https://cdn.example.com/ana.png",
        is_active=True,
        show_curriculum=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user_payload():
    return {
        "firstName": "Luis",
        "lastName": "Pérez",
        "email": "luis@example.com",
        "role": "Diseñador",
    }
