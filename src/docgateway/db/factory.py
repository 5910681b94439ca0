"""
Gateway factory.
Creates and holds the single DocumentGateway used by the application.
"""

import logging
from typing import Optional

from .documents import DocumentGateway
from .session import DEFAULT_DATABASE, StoreSession

logger = logging.getLogger(__name__)


class GatewayFactory:
    """
    Factory for creating and managing the gateway instance.

    Usage:
        # Initialize at startup
        gateway = await GatewayFactory.initialize("mongodb://localhost:27017/shop")

        # Use from request handlers
        items = await GatewayFactory.get_instance().list_documents("items")
    """

    _instance: Optional[DocumentGateway] = None

    @classmethod
    async def initialize(cls, connection_str: str, default_database: str = DEFAULT_DATABASE) -> DocumentGateway:
        """
        Connect to MongoDB and build the gateway.

        Raises:
            StoreConnectionError: the connection or startup ping failed
        """
        if cls._instance is not None:
            logger.info("GatewayFactory: Already initialized")
            return cls._instance

        session = await StoreSession.connect(connection_str, default_database)
        cls._instance = DocumentGateway(session)
        logger.info("GatewayFactory: Initialized gateway")
        return cls._instance

    @classmethod
    def get_instance(cls) -> DocumentGateway:
        """Get the current gateway instance"""
        if cls._instance is None:
            raise RuntimeError("Gateway not initialized. Call initialize() first.")
        return cls._instance

    @classmethod
    def set_instance(cls, instance: Optional[DocumentGateway]) -> None:
        """Set the current gateway instance (mainly for testing)."""
        cls._instance = instance
        logger.info("Gateway instance set")

    @classmethod
    async def close(cls) -> None:
        """Close the store connection and clean up"""
        if cls._instance is not None:
            cls._instance.session.close()
            cls._instance = None
            logger.info("Gateway instance closed and cleaned up")

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None
