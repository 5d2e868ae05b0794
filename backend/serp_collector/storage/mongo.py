"""MongoDB persistence for search records."""

import asyncio
from collections.abc import Callable, Sequence
from typing import Any

import structlog
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from serp_collector.config.settings import Settings
from serp_collector.search.models import SearchRecord

logger = structlog.get_logger(__name__)


class StorageError(Exception):
    """Raised when search records cannot be written to MongoDB."""


class MongoRecordStore:
    """Process-wide MongoDB handle that bulk-inserts search records."""

    def __init__(
        self,
        uri: str,
        database: str,
        collection: str,
        timeout: float = 10.0,
        client_factory: Callable[..., Any] | None = None,
    ):
        """
        Initialize the store. No connection is made until ``connect()``.

        Args:
            uri: MongoDB connection URI
            database: Database name
            collection: Collection name
            timeout: Upper bound in seconds for connect, ping and insert
            client_factory: Callable building the async client
        """
        self.uri = uri
        self.database_name = database
        self.collection_name = collection
        self.timeout = timeout
        self._client_factory = client_factory or AsyncMongoClient
        self.client: Any = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoRecordStore":
        return cls(
            uri=settings.mongodb_uri,
            database=settings.mongodb_database,
            collection=settings.mongodb_collection,
            timeout=settings.mongodb_connect_timeout,
        )

    async def connect(self) -> None:
        """Create the client if needed and verify the server answers a ping."""
        try:
            if self.client is None:
                timeout_ms = int(self.timeout * 1000)
                self.client = self._client_factory(
                    self.uri,
                    serverSelectionTimeoutMS=timeout_ms,
                    connectTimeoutMS=timeout_ms,
                )
            await asyncio.wait_for(self._ping(), timeout=self.timeout)
        except (PyMongoError, asyncio.TimeoutError) as e:
            logger.error("Failed to connect to MongoDB", error=str(e) or type(e).__name__, uri=self.uri)
            raise StorageError(f"failed to connect to MongoDB: {e}") from e

        logger.info(
            "MongoDB connection established",
            database=self.database_name,
            collection=self.collection_name,
        )

    async def ping(self) -> bool:
        """Return True if the server answers a ping within the timeout."""
        if self.client is None:
            return False
        try:
            await asyncio.wait_for(self._ping(), timeout=self.timeout)
        except (PyMongoError, asyncio.TimeoutError) as e:
            logger.warning("MongoDB ping failed", error=str(e) or type(e).__name__)
            return False
        return True

    async def persist(self, records: Sequence[SearchRecord]) -> int:
        """
        Insert a batch of records with a single bulk write.

        Args:
            records: Records to insert, possibly empty

        Returns:
            Number of inserted documents

        Raises:
            StorageError: If the ping or insert fails or exceeds the timeout
        """
        if not records:
            logger.info("No search records to persist")
            return 0

        if self.client is None:
            await self.connect()

        documents = [record.to_document() for record in records]
        try:
            result = await asyncio.wait_for(self._write(documents), timeout=self.timeout)
        except (PyMongoError, asyncio.TimeoutError) as e:
            logger.error(
                "Failed to insert search records",
                error=str(e) or type(e).__name__,
                records=len(documents),
            )
            raise StorageError(f"failed to insert search records: {e}") from e

        inserted = len(result.inserted_ids)
        logger.info(
            "Search records inserted",
            records=inserted,
            database=self.database_name,
            collection=self.collection_name,
        )
        return inserted

    async def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self.client is not None:
            await self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")

    async def _ping(self) -> None:
        await self.client.admin.command("ping")

    async def _write(self, documents: list[dict[str, str]]):
        await self._ping()
        collection = self.client[self.database_name][self.collection_name]
        return await collection.insert_many(documents)
