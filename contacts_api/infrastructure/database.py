"""Document Store Manager — one lazily-initialized MongoDB handle per process.

Invariants:
    - initialize() connects at most once; later calls return the same handle
    - get_handle() before a successful initialize() raises StoreUninitializedError
    - release() never raises: close failures are logged, not propagated
    - Connect failures surface as StoreConnectionError (fatal at boot)

Design Decisions:
    - Singleton store_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - client_factory injectable so the lifecycle is testable without a server
    - tz_aware=True: timestamps read back carry UTC tzinfo
"""

import logging
from typing import Callable

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from contacts_api.core.errors import StoreConnectionError, StoreUninitializedError

logger = logging.getLogger(__name__)


class StoreManager:
    """Owns the MongoDB client and database handle for the process lifetime."""

    def __init__(
        self,
        url: str,
        db_name: str = "test",
        timeout_ms: int = 5000,
        client_factory: Callable[..., AsyncMongoClient] = AsyncMongoClient,
    ):
        self.url = url
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client: AsyncMongoClient | None = None
        self._db: AsyncDatabase | None = None

    @property
    def is_initialized(self) -> bool:
        return self._db is not None

    async def initialize(self) -> AsyncDatabase:
        """Connect and verify with a ping. Idempotent."""
        if self._db is not None:
            logger.info("Document store is already initialized")
            return self._db

        client = None
        try:
            client = self._client_factory(
                self.url,
                serverSelectionTimeoutMS=self.timeout_ms,
                tz_aware=True,
            )
            db = client[self.db_name]
            await db.command("ping")
        except PyMongoError as e:
            logger.error(f"Document store connection failed: {e}")
            if client is not None:
                await _close_quietly(client)
            raise StoreConnectionError(str(e))

        self._client = client
        self._db = db
        logger.info(f"Document store connected (database '{self.db_name}')")
        return db

    def get_handle(self) -> AsyncDatabase:
        if self._db is None:
            raise StoreUninitializedError()
        return self._db

    async def release(self) -> None:
        """Close the client. No-op if never initialized."""
        client = self._client
        self._client = None
        self._db = None
        if client is None:
            return
        try:
            await client.close()
            logger.info("Document store connection closed")
        except Exception as e:
            logger.error(f"Error closing document store connection: {e}")

    async def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        if self._db is None:
            return False
        try:
            await self._db.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Store health check failed: {e}")
            return False


async def _close_quietly(client: AsyncMongoClient) -> None:
    try:
        await client.close()
    except Exception as e:
        logger.error(f"Error closing failed store client: {e}")


# Singleton (initialized on startup)
store_manager: StoreManager | None = None


def init_store(url: str, **kwargs) -> StoreManager:
    global store_manager
    store_manager = StoreManager(url, **kwargs)
    return store_manager


def get_db() -> AsyncDatabase:
    """FastAPI dependency for the database handle."""
    if not store_manager:
        raise StoreUninitializedError()
    return store_manager.get_handle()
