"""Test configuration and fixtures"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from brewbliss.config import Settings
from brewbliss.database import Database
from brewbliss.main import create_app
from brewbliss.models.reservation import Reservation


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_database():
    """Create test database"""
    database = Database(TEST_DATABASE_URL)
    await database.create_all()

    yield database

    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def test_db(test_database):
    """Session on the test database"""
    async with test_database.session() as session:
        yield session


@pytest.fixture
def reservation_data():
    """A valid booking payload for a far-future slot"""
    return {
        "name": "John Doe",
        "email": "john@x.com",
        "phone": "1234567890",
        "guests": 4,
        "date": "2099-02-15",
        "time": "19:00",
    }


@pytest.fixture
async def make_reservation(test_db):
    """Insert a reservation directly, bypassing the service"""
    async def _make(**overrides):
        fields = {
            "name": "Existing Guest",
            "email": "existing@example.com",
            "phone": "5550001111",
            "guests": 2,
            "date": date(2099, 2, 15),
            "time": "19:00",
            "occasion": "",
            "status": "pending",
        }
        fields.update(overrides)
        reservation = Reservation(**fields)
        test_db.add(reservation)
        await test_db.commit()
        await test_db.refresh(reservation)
        return reservation

    return _make


@pytest.fixture
def app(test_database):
    """Application bound to the test database"""
    application = create_app(Settings(database_url=TEST_DATABASE_URL, create_tables=False))
    application.state.db = test_database
    return application


@pytest.fixture
async def client(app):
    """Create test client"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
