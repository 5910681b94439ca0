"""
Gateway exception definitions.
Organized by concern: identifier validation, document decoding, store operations.
"""


class GatewayError(Exception):
    """Base class for all errors raised by the gateway."""

    default_message = "Gateway error"

    def __init__(self, e=None, message=None):
        if message:
            super().__init__(message)
        elif e:
            super().__init__(str(e))
        else:
            super().__init__(self.default_message)
        self.error = e
        self.message = message or str(self)


# ==================== Identifier Exceptions ====================

class InvalidIdentifier(GatewayError):
    """Raised when a caller-supplied id is not a 24 character hex string."""

    default_message = "Invalid ObjectId"

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message=message or f"Invalid ObjectId: {value!r} is not a 24 character hex string")


class IdentifierExtractionError(GatewayError):
    """Raised when a successful insert did not yield a usable ObjectId."""

    default_message = "Failed to get inserted ID"


# ==================== Mapping Exceptions ====================

class DecodeError(GatewayError):
    """Raised when a stored document cannot be translated into a Record."""

    default_message = "Failed to decode document"


# ==================== Store Exceptions ====================

class StoreOperationError(GatewayError):
    """Raised for store failures (connection, timeout, server error) during an operation."""

    default_message = "Store operation failed"

    def __init__(self, e=None, message=None, operation: str = "", collection: str = ""):
        self.operation = operation
        self.collection = collection
        super().__init__(e, message)


class StoreConnectionError(GatewayError):
    """Raised when the store connection or the startup ping fails."""

    default_message = "Failed to connect to MongoDB"
