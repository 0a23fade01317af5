"""
Shared fixtures: repositories on both storage backends and an API client.
"""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from medilink.adapters.db.mongo.repositories import build_mongo_repositories, ensure_indexes
from medilink.adapters.db.sql.repositories import build_sql_repositories
from medilink.adapters.db.sql.session import build_engine, build_session_factory, create_schema
from medilink.app import create_app
from medilink.core.config import LoggingSettings, Settings, SqlSettings, StorageSettings
from medilink.domain.entities import Admin, Doctor, UserFields

IN_MEMORY_SQLITE = "sqlite+aiosqlite://"


@pytest.fixture(params=["sql", "mongo"])
async def repositories(request):
    """Repositories of each backend, on a fresh empty store."""
    if request.param == "sql":
        engine = build_engine(SqlSettings(url=IN_MEMORY_SQLITE))
        await create_schema(engine)
        yield build_sql_repositories(build_session_factory(engine))
        await engine.dispose()
    else:
        database = AsyncMongoMockClient()["medilink_test"]
        await ensure_indexes(database)
        yield build_mongo_repositories(database)


@pytest.fixture
def test_settings():
    return Settings(
        app_env="testing",
        storage=StorageSettings(backend="sql"),
        sql=SqlSettings(url=IN_MEMORY_SQLITE),
        logging=LoggingSettings(level="WARNING", format="text"),
    )


@pytest.fixture
def client(test_settings):
    """Create a test client running the app lifespan on in-memory SQLite."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def john_doe():
    return Admin(
        user=UserFields(
            first_name="John",
            last_name="Doe",
            email="john@x.com",
            phone="123",
            password="pw",
        )
    )


@pytest.fixture
def make_doctor():
    """Factory for doctors that differ only in their unique fields."""

    def _make(email: str, phone: str, hospital_name: str = "General Hospital") -> Doctor:
        return Doctor(
            user=UserFields(
                first_name="Gregory",
                last_name="House",
                email=email,
                phone=phone,
                password="secret",
            ),
            specialisation="Diagnostics",
            hospital_name=hospital_name,
        )

    return _make
