"""
Conversion between stored MongoDB documents and Records.

This is the only place that handles ObjectId. Everything outside the db
package sees identifiers as 24 character hex strings.
"""

import re
from typing import Any, Dict

from bson import ObjectId
from pydantic import ValidationError

from ..exceptions import DecodeError, InvalidIdentifier
from ..models import Record, StoredRecord

ID_FIELD = "_id"
RECORD_ID_FIELD = "id"

_HEX_ID = re.compile(r"[0-9a-fA-F]{24}")


def to_hex(object_id: ObjectId) -> str:
    """Canonical hex form of an ObjectId"""
    return str(object_id)


def parse_identifier(value: str) -> ObjectId:
    """Convert a caller supplied hex id to an ObjectId.

    Raises:
        InvalidIdentifier: value is not exactly 24 hex characters
    """
    if not isinstance(value, str) or not _HEX_ID.fullmatch(value):
        raise InvalidIdentifier(value)
    return ObjectId(value)


def _serialize(record: Record) -> Dict[str, Any]:
    document = record.model_dump(mode="python")

    # The store assigns and owns _id
    document.pop(RECORD_ID_FIELD, None)
    document.pop(ID_FIELD, None)
    return document


def encode_for_insert(record: Record) -> Dict[str, Any]:
    """Document to insert; any caller supplied id is discarded."""
    return _serialize(record)


def encode_for_update(record: Record) -> Dict[str, Any]:
    """Fields for a $set update; the identifier is never part of it."""
    return _serialize(record)


def decode(document: Dict[str, Any]) -> StoredRecord:
    """Translate a stored document into a StoredRecord.

    Raises:
        DecodeError: _id is missing or not an ObjectId, or the remaining
            fields do not fit the Record shape
    """
    object_id = document.get(ID_FIELD)
    if object_id is None:
        raise DecodeError(message="Document has no _id field")
    if not isinstance(object_id, ObjectId):
        raise DecodeError(message=f"_id {object_id!r} is {type(object_id).__name__}, expected ObjectId")

    data = dict(document)
    del data[ID_FIELD]
    data[RECORD_ID_FIELD] = to_hex(object_id)

    try:
        return StoredRecord.model_validate(data)
    except ValidationError as e:
        raise DecodeError(e, message=f"Document {data[RECORD_ID_FIELD]} does not match Record: {e}")
