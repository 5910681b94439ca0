"""
Document store CRUD gateway.

This package exposes list, create, update and delete operations over named
MongoDB collections, translating ObjectId identifiers to hex strings for
external callers.
"""

__version__ = "0.1.0"

from . import models
from . import db
from . import routers

__all__ = ["models", "db", "routers"]
