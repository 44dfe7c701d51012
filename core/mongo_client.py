"""
MongoDB Client Wrapper

Centralized MongoDB client wrapper using pymongo's asyncio client.
Provides configuration integration and a consistent database access pattern.

Usage:
    from core.mongo_client import get_mongo_client

    # Get client instance
    db = get_mongo_client("signup_service")

    # Query collections
    page = await db.collection("pages").find_one({"code": "ed"})
"""

import logging
from typing import Dict, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoClientWrapper:
    """
    MongoDB client wrapper with configuration integration.

    Wraps AsyncMongoClient and provides:
    - Environment/config fallbacks for URL and database name
    - Collection access by name
    - Health check and shutdown
    """

    def __init__(
        self,
        service_name: str,
        url: Optional[str] = None,
        database: Optional[str] = None,
        timeout_ms: Optional[int] = None,
    ):
        """
        Initialize MongoDB client wrapper.

        Args:
            service_name: Name of the service using this client
            url: MongoDB connection URL (defaults to settings)
            database: Database name (defaults to settings)
            timeout_ms: Server selection timeout in milliseconds
        """
        from core.config import get_settings

        infra = get_settings().infra

        self.service_name = service_name
        self.url = url or infra.mongodb_url
        self.database_name = database or infra.mongodb_database
        self.timeout_ms = timeout_ms or infra.mongodb_timeout_ms

        # Connection is established lazily on first operation
        self._client = AsyncMongoClient(
            self.url,
            serverSelectionTimeoutMS=self.timeout_ms,
            appname=service_name,
        )
        self._database = self._client[self.database_name]

        logger.info(f"MongoDB client initialized for {service_name}: database={self.database_name}")

    @property
    def client(self) -> AsyncMongoClient:
        """Get underlying AsyncMongoClient"""
        return self._client

    @property
    def database(self):
        """Get the configured database"""
        return self._database

    def collection(self, name: str):
        """Get a collection from the configured database"""
        return self._database[name]

    async def health_check(self) -> bool:
        """Ping the server"""
        try:
            await self._database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    async def close(self):
        """Close connection"""
        await self._client.close()


# Singleton instances per service
_mongo_clients: Dict[str, MongoClientWrapper] = {}


def get_mongo_client(
    service_name: str,
    url: Optional[str] = None,
    database: Optional[str] = None,
    **kwargs,
) -> MongoClientWrapper:
    """
    Get or create MongoDB client for a service.

    Args:
        service_name: Service name
        url: Optional URL override
        database: Optional database override
        **kwargs: Additional client options

    Returns:
        MongoClientWrapper instance
    """
    global _mongo_clients

    if service_name not in _mongo_clients:
        client = MongoClientWrapper(
            service_name=service_name,
            url=url,
            database=database,
            **kwargs,
        )
        _mongo_clients[service_name] = client

    return _mongo_clients[service_name]

