"""
Storage backend selection.

The backend is chosen once from ``STORAGE_BACKEND`` at start-up; everything
downstream only sees the resulting ``Repositories`` bundle.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import text

from ...application.ports.repositories import Repositories
from ...core.config import Settings
from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """Owns the store connection and the repositories built on it."""

    name: str = ""

    def __init__(self) -> None:
        self._repositories: Optional[Repositories] = None

    @property
    def repositories(self) -> Repositories:
        if self._repositories is None:
            raise ConfigurationError(f"Storage backend '{self.name}' is not open")
        return self._repositories

    @abstractmethod
    async def open(self) -> Repositories:
        """Connect, prepare schema/indexes and build the repositories."""
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Round-trip to the store; raises when it is unreachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the connection pool."""
        pass


class SqlStorageBackend(StorageBackend):
    """Relational backend over SQLAlchemy's async engine."""

    name = "sql"

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings.sql
        self._engine = None

    async def open(self) -> Repositories:
        from .sql.repositories import build_sql_repositories
        from .sql.session import build_engine, build_session_factory, create_schema

        self._engine = build_engine(self._settings)
        await create_schema(self._engine)
        self._repositories = build_sql_repositories(build_session_factory(self._engine))
        logger.info(f"SQL storage ready ({self._engine.url.render_as_string(hide_password=True)})")
        return self._repositories

    async def ping(self) -> None:
        if self._engine is None:
            raise ConfigurationError("SQL storage is not open")
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None


class MongoStorageBackend(StorageBackend):
    """Document backend over a motor client."""

    name = "mongo"

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings.database
        self._client = None

    async def open(self) -> Repositories:
        from motor.motor_asyncio import AsyncIOMotorClient

        from .mongo.repositories import build_mongo_repositories, ensure_indexes

        mongo_uri = self._settings.uri
        # Enable TLS only for Atlas SRV URIs
        if mongo_uri.startswith("mongodb+srv://"):
            import certifi

            self._client = AsyncIOMotorClient(
                mongo_uri,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
                tls=True,
                tlsCAFile=certifi.where(),
            )
        else:
            self._client = AsyncIOMotorClient(
                mongo_uri,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
            )

        database = self._client[self._settings.db_name]
        await ensure_indexes(database)
        self._repositories = build_mongo_repositories(database)
        logger.info(f"MongoDB storage ready (database '{self._settings.db_name}')")
        return self._repositories

    async def ping(self) -> None:
        if self._client is None:
            raise ConfigurationError("MongoDB storage is not open")
        await self._client.admin.command("ping")

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def create_storage_backend(settings: Settings) -> StorageBackend:
    """Pick the backend named by the storage settings."""
    backend = settings.storage.backend
    if backend == "sql":
        return SqlStorageBackend(settings)
    if backend == "mongo":
        return MongoStorageBackend(settings)
    raise ConfigurationError(f"Unknown storage backend '{backend}'", {"backend": backend})
