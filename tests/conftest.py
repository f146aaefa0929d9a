import os
from collections.abc import AsyncGenerator
from datetime import date
from pathlib import Path

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Load environment variables from .env file
load_dotenv()

# Tests never touch the configured database; each test gets its own SQLite file
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "console"
os.environ.pop("DATABASE_URL", None)

from clinic_app.database import create_engine_for_url, get_db  # noqa: E402
from clinic_app.main import app  # noqa: E402
from clinic_app.models import metadata  # noqa: E402
from clinic_app.repositories import (  # noqa: E402
    InMemoryPatientRepository,
    PatientRepository,
    SQLPatientRepository,
)
from clinic_app.schemas.patients import PatientCreate  # noqa: E402
from clinic_app.services.patient_service import PatientService  # noqa: E402


@pytest_asyncio.fixture
async def test_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a throwaway SQLite database with the full schema."""
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'clinic_test.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(params=["sql", "memory"])
def patient_repository(request, db_session: AsyncSession) -> PatientRepository:
    """Each storage adapter in turn."""
    if request.param == "sql":
        return SQLPatientRepository(db_session)
    return InMemoryPatientRepository()


@pytest.fixture
def patient_service(patient_repository: PatientRepository) -> PatientService:
    """Patient service over the parametrized repository."""
    return PatientService(patient_repository)


@pytest.fixture
def sample_patient_data() -> dict:
    """Sample registration payload for testing."""
    return {
        "first_name": "John",
        "last_name": "Doe",
        "date_of_birth": "1990-01-15",
        "phone_number": "555-123-4567",
        "email": "john.doe@example.com",
        "address": "123 Test Street",
        "medical_history": "No known issues",
    }


@pytest.fixture
def second_patient_data() -> dict:
    """A second patient with a distinct email."""
    return {
        "first_name": "Jane",
        "last_name": "Smith",
        "date_of_birth": "1985-05-20",
        "phone_number": "555-987-6543",
        "email": "jane.smith@example.com",
        "address": "456 Another Street",
    }


@pytest.fixture
def make_patient():
    """Build a PatientCreate, overriding any field."""

    def _make(**overrides) -> PatientCreate:
        values = {
            "first_name": "John",
            "last_name": "Doe",
            "date_of_birth": date(1990, 1, 15),
            "phone_number": "555-123-4567",
            "email": "john.doe@example.com",
            "address": "123 Test Street",
            "medical_history": "No known issues",
        }
        values.update(overrides)
        return PatientCreate(**values)

    return _make


@pytest.fixture
def sample_appointment_data() -> dict:
    """Sample appointment payload for testing."""
    return {
        "doctor_name": "Dr. Gregory House",
        "appointment_at": "2030-03-01T09:30:00+00:00",
        "reason": "Regular checkup",
        "notes": "First visit",
    }
