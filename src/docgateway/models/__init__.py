from .record import Record, StoredRecord

__all__ = ["Record", "StoredRecord"]
