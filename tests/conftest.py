"""
Pytest configuration: every test gets its own SQLite database file.
"""

import pytest
from fastapi.testclient import TestClient

from restaurant_ops.config import Settings
from restaurant_ops.db.session import Database
from restaurant_ops.main import create_app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway database."""
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def api_client(settings: Settings):
    """Test client with the app lifespan running."""
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
async def database(settings: Settings):
    db = Database(settings.DATABASE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database):
    async with database.session_factory() as s:
        yield s


@pytest.fixture
def arepa_payload() -> dict:
    return {"name": "Arepa", "price": 5, "category": "snack"}


@pytest.fixture
def order_payload() -> dict:
    return {
        "displayId": "A1",
        "customer": {"name": "Ana"},
        "items": [{"name": "Arepa", "quantity": 2}],
        "total": 10,
    }
