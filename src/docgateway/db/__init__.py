"""
Database layer.

Architecture:
- StoreSession: shared motor client, database resolution
- mapper: ObjectId <-> hex string, document <-> Record
- DocumentGateway: list, create, update, delete
- GatewayFactory: process-wide gateway instance
"""

from .session import StoreSession, DEFAULT_DATABASE
from .documents import DocumentGateway
from .factory import GatewayFactory

__all__ = ['StoreSession', 'DEFAULT_DATABASE', 'DocumentGateway', 'GatewayFactory']
