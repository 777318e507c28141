"""MongoDB connection management for the content store."""

import logging
import threading
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from pymongo import AsyncMongoClient
from pymongo.errors import ExecutionTimeout, NetworkTimeout, PyMongoError

from .config import get_settings
from .errors import RequestTimeout, StoreUnavailable

logger = logging.getLogger("content_store")


class MongoDatabase:
    """Process-wide MongoDB handle.

    The client is created on the first ``connect()`` call rather than at
    startup, and every later call returns the same database handle.
    """

    _client: AsyncMongoClient | None = None
    _database: Any = None
    _lock = threading.Lock()

    @classmethod
    async def connect(cls) -> Any:
        """Establish the shared connection, or reuse it if already open."""
        if cls._database is not None:
            return cls._database

        settings = get_settings()
        try:
            with cls._lock:
                if cls._client is None:
                    cls._client = AsyncMongoClient(
                        settings.mongo_uri,
                        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
                        timeoutMS=settings.mongo_timeout_ms,
                        tz_aware=True,
                    )
                client = cls._client

            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB unreachable at {settings.mongo_uri}: {e}")
            raise StoreUnavailable("Content store is unavailable") from e

        with cls._lock:
            if cls._database is None:
                cls._database = client[settings.mongo_database]
                logger.info(f"Connected to MongoDB database '{settings.mongo_database}'")
        return cls._database

    @classmethod
    def bind(cls, database: Any) -> None:
        """Install a ready database handle, skipping the client."""
        with cls._lock:
            cls._database = database

    @classmethod
    async def disconnect(cls) -> None:
        """Close the MongoDB client."""
        with cls._lock:
            client = cls._client
            cls._client = None
            cls._database = None
        if client is not None:
            await client.close()
            logger.info("Disconnected from MongoDB")

    @classmethod
    async def get_collection(cls, name: str) -> Any:
        """Get a collection from the shared database."""
        database = await cls.connect()
        return database[name]


@asynccontextmanager
async def store_errors(operation: str) -> AsyncGenerator[None, None]:
    """Translate driver failures raised inside the block into domain errors."""
    try:
        yield
    except (ExecutionTimeout, NetworkTimeout) as e:
        logger.warning(f"{operation} timed out: {e}")
        raise RequestTimeout(f"{operation} timed out, please retry") from e
    except PyMongoError as e:
        logger.error(f"{operation} failed: {e}")
        raise StoreUnavailable(f"Failed to {operation}") from e
