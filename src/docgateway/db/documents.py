"""
CRUD gateway over MongoDB collections.
Contains the DocumentGateway class with list, create, update and delete.
"""

import logging
from typing import List

from bson import ObjectId
from pymongo.errors import InvalidName, PyMongoError

from ..exceptions import DecodeError, IdentifierExtractionError, StoreOperationError
from ..models import Record, StoredRecord
from . import mapper
from .session import StoreSession

logger = logging.getLogger(__name__)


class DocumentGateway:
    """List, create, update and delete Records in named collections.

    Each call is a single round trip to the store. Store errors are wrapped in
    StoreOperationError and raised once; nothing is retried.
    """

    def __init__(self, session: StoreSession):
        self.session = session

    async def list_documents(self, collection: str) -> List[StoredRecord]:
        """Return every decodable document in the collection, in scan order.

        Documents that cannot be decoded are skipped and logged.
        """
        logger.info(f"Finding all items in {collection!r}")

        results: List[StoredRecord] = []
        skipped = 0
        try:
            cursor = self.session.collection(collection).find({})
            async for document in cursor:
                try:
                    record = mapper.decode(document)
                except DecodeError as e:
                    skipped += 1
                    logger.warning(f"Skipping document in {collection!r}: {e.message}")
                    continue
                logger.debug(f"Found item: {record!r}")
                results.append(record)
        except InvalidName as e:
            # No such collection can exist, so nothing matches
            logger.warning(f"Invalid collection name {collection!r}: {e}")
            return []
        except PyMongoError as e:
            logger.error(f"MongoDB find error on {collection!r}: {e}")
            raise StoreOperationError(e, message=f"Failed to find documents: {str(e)}",
                                      operation="list", collection=collection)

        logger.info(f"Found {len(results)} items in {collection!r} ({skipped} skipped)")
        return results

    async def create(self, collection: str, record: Record) -> str:
        """Insert a record and return the id the store assigned to it.

        An invalid collection name has nothing to insert into, so it is a
        StoreOperationError here rather than an empty result.
        """
        logger.info(f"Adding new item to {collection!r}: {record!r}")
        document = mapper.encode_for_insert(record)

        try:
            result = await self.session.collection(collection).insert_one(document)
        except PyMongoError as e:
            logger.error(f"MongoDB insert error on {collection!r}: {e}")
            raise StoreOperationError(e, message=f"Failed to insert document: {str(e)}",
                                      operation="create", collection=collection)

        inserted_id = getattr(result, "inserted_id", None)
        if not isinstance(inserted_id, ObjectId):
            logger.error(f"Insert into {collection!r} returned unusable id {inserted_id!r}")
            raise IdentifierExtractionError()

        id_str = mapper.to_hex(inserted_id)
        logger.info(f"Item added with ID: {id_str}")
        return id_str

    async def update(self, collection: str, id: str, record: Record) -> bool:
        """Overwrite the record's fields on the document with this id.

        Returns True only when at least one field changed. A missing document
        and an update that changes nothing both return False, as does an
        invalid collection name.
        """
        logger.info(f"Updating item with ID: {id} in {collection!r}")
        object_id = mapper.parse_identifier(id)

        query = {"_id": object_id}
        update = {"$set": mapper.encode_for_update(record)}
        logger.debug(f"Update filter: {query}, update: {update}")

        try:
            result = await self.session.collection(collection).update_one(query, update)
        except InvalidName as e:
            logger.warning(f"Invalid collection name {collection!r}: {e}")
            return False
        except PyMongoError as e:
            logger.error(f"MongoDB update error on {collection!r}: {e}")
            raise StoreOperationError(e, message=f"Failed to update document: {str(e)}",
                                      operation="update", collection=collection)

        logger.info(f"Update result: matched={result.matched_count}, modified={result.modified_count}")
        return result.modified_count > 0

    async def delete(self, collection: str, id: str) -> bool:
        """Delete the document with this id; False when nothing matched,
        including when the collection name is invalid"""
        logger.info(f"Deleting item with ID: {id} from {collection!r}")
        object_id = mapper.parse_identifier(id)

        try:
            result = await self.session.collection(collection).delete_one({"_id": object_id})
        except InvalidName as e:
            logger.warning(f"Invalid collection name {collection!r}: {e}")
            return False
        except PyMongoError as e:
            logger.error(f"MongoDB delete error on {collection!r}: {e}")
            raise StoreOperationError(e, message=f"Failed to delete document: {str(e)}",
                                      operation="delete", collection=collection)

        logger.info(f"Delete result: deleted_count={result.deleted_count}")
        return result.deleted_count > 0
