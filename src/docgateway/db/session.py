"""
MongoDB store session.
Owns the shared motor client and resolves the database to operate against.
"""

import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from ..exceptions import StoreConnectionError

logger = logging.getLogger(__name__)

# Used when the connection string does not name a database
DEFAULT_DATABASE = "default_db"


class StoreSession:
    """Long-lived handle to MongoDB shared by all requests.

    The motor client keeps its own connection pool and is safe for
    concurrent use, so the session is never locked.
    """

    def __init__(self, client: AsyncIOMotorClient, default_database: str = DEFAULT_DATABASE):
        self._client = client
        self._default_database = default_database or DEFAULT_DATABASE

    @classmethod
    async def connect(cls, connection_str: str, default_database: str = DEFAULT_DATABASE) -> "StoreSession":
        """Create the client and check the server answers a ping"""
        client: Optional[AsyncIOMotorClient] = None
        try:
            client = AsyncIOMotorClient(connection_str)
            await client.admin.command('ping')
        except Exception as e:
            logger.error(f"MongoDB connection failed: {e}")
            if client is not None:
                client.close()
            raise StoreConnectionError(e, message=f"Failed to connect to MongoDB: {str(e)}")

        session = cls(client, default_database)
        logger.info(f"Connected to MongoDB, using database {session.resolve_database().name}")
        return session

    @property
    def client(self) -> Optional[AsyncIOMotorClient]:
        return self._client

    def resolve_database(self) -> AsyncIOMotorDatabase:
        """Database named in the connection string, else the default database"""
        return self._client.get_default_database(default=self._default_database)

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.resolve_database()[name]

    def close(self) -> None:
        """Close MongoDB connection"""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")
