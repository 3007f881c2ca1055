# tests/conftest.py
import asyncio
import os
import tempfile
from decimal import Decimal

# Configure the app before it is imported: throwaway SQLite database and media dir
_TEST_DIR = tempfile.mkdtemp(prefix="arm-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'cli.db')}"
os.environ["SEED_DEFAULT_DATA"] = "false"
os.environ["MEDIA_UPLOAD_DIR"] = os.path.join(_TEST_DIR, "media")
os.environ["AI_API_KEY"] = ""
os.environ["ENV_FILE"] = os.path.join(_TEST_DIR, "missing.env")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from arm_backend.core.config import get_settings
from arm_backend.core.enums import PaymentStatus
from arm_backend.database import Base
from arm_backend.dependencies import get_db
from arm_backend.main import app
from arm_backend.models.donation import Donation

ADMIN_CREDENTIALS = {
    "X-Admin-Password": "admin123",
    "X-Admin-Secret": "arm2024secure",
}


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def session_factory(tmp_path):
    """Fresh SQLite database per test, tables created up front."""
    db_file = tmp_path / "test.db"

    sync_engine = create_engine(f"sqlite:///{db_file}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    # NullPool: TestClient and pytest-asyncio run on different event loops
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", poolclass=NullPool)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Provide a database session for tests"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    """TestClient bound to the per-test database. Lifespan (seeding, migrations) is not run."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_credentials():
    return dict(ADMIN_CREDENTIALS)


@pytest.fixture
def sign_up(client):
    """Create an account through the API and return {token, user}."""
    def _sign_up(email="militant@arm-mali.org", password="motdepasse123", name="Awa Traoré"):
        response = client.post(
            "/api/auth/sign-up/email",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _sign_up


@pytest.fixture
def auth_headers(sign_up):
    token = sign_up()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(sign_up):
    token = sign_up(email="admin@arm-mali.org", name="Admin")["token"]
    return {"Authorization": f"Bearer {token}", **ADMIN_CREDENTIALS}


@pytest.fixture
def member_payload():
    return {
        "fullName": "Awa Traoré",
        "nina": "1234567890",
        "commune": "Sebenikoro",
        "profession": "Enseignante",
        "phone": "+22370000000",
        "email": "awa@arm-mali.org",
    }


@pytest.fixture
def registered_member(client, auth_headers, member_payload):
    response = client.post("/api/members/register", json=member_payload, headers=auth_headers)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def add_donation(session_factory):
    """Insert a donation row directly; no route moves a donation out of pending."""
    def _add_donation(amount, currency="EUR", status=PaymentStatus.COMPLETED.value):
        async def insert():
            async with session_factory() as session:
                session.add(Donation(
                    donor_name="Ibrahim Touré",
                    donor_email="ibrahim@arm-mali.org",
                    amount=Decimal(str(amount)),
                    currency=currency,
                    status=status,
                ))
                await session.commit()
        asyncio.run(insert())
    return _add_donation
