"""
Base repository with generic CRUD operations for MongoDB.
All entity-specific repositories should inherit from this.
"""
from typing import Optional, List, Dict, Any, Tuple
from datetime import datetime, timezone
import logging

from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.exceptions import UnavailableError
from app.utils.logger import log_database_operation

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Timezone-aware current time, truncated to MongoDB's millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def to_object_id(doc_id: Any) -> Optional[ObjectId]:
    """Convert a string id to ObjectId; None when it is not a valid id."""
    if isinstance(doc_id, ObjectId):
        return doc_id
    if isinstance(doc_id, str) and ObjectId.is_valid(doc_id):
        return ObjectId(doc_id)
    return None


class BaseRepository:
    """
    Generic repository for MongoDB CRUD operations.

    Provides standard methods: create, find_by_id, find_all, update, delete, etc.
    Driver failures other than duplicate keys are raised as UnavailableError.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    @staticmethod
    def _serialize(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Replace the ObjectId ``_id`` with a string ``id``."""
        if document and '_id' in document:
            document['id'] = str(document.pop('_id'))
        return document

    def _unavailable(self, operation: str, error: PyMongoError) -> UnavailableError:
        logger.error(f"MongoDB {operation} on {self.collection.name} failed: {error}")
        return UnavailableError(details={"operation": operation})

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document, stamping created_at/updated_at.

        Args:
            document: Document data

        Returns:
            The stored document with its string ``id``

        Raises:
            DuplicateKeyError: If a unique index rejects the document
        """
        now = utcnow()
        document = dict(document)
        document['created_at'] = now
        document['updated_at'] = now

        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            raise self._unavailable("insert", e) from e

        document['_id'] = result.inserted_id
        logger.info(f"Created document in {self.collection.name}: {result.inserted_id}")
        return self._serialize(document)

    async def find_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Args:
            doc_id: Document ID (string or ObjectId)

        Returns:
            Document data or None if not found or the id is malformed
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None

        log_database_operation(logger, "find", self.collection.name, str(object_id))
        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise self._unavailable("find", e) from e
        return self._serialize(document)

    async def find_all(
        self,
        filter_query: Optional[Dict[str, Any]] = None,
        sort: Optional[List[Tuple[str, int]]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find all documents matching filter.

        Args:
            filter_query: MongoDB filter query (None for all documents)
            sort: List of (field, direction) tuples for sorting

        Returns:
            List of documents
        """
        query = filter_query or {}
        log_database_operation(logger, "find_all", self.collection.name)
        try:
            cursor = self.collection.find(query)
            if sort:
                cursor = cursor.sort(sort)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._unavailable("find_all", e) from e

        return [self._serialize(doc) for doc in documents]

    async def exists(self, filter_query: Dict[str, Any]) -> bool:
        """Check if a document matching filter exists."""
        try:
            count = await self.collection.count_documents(filter_query, limit=1)
        except PyMongoError as e:
            raise self._unavailable("count", e) from e
        return count > 0

    async def update(
        self,
        doc_id: str,
        update_data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Set fields on a document by ID, refreshing updated_at.

        Args:
            doc_id: Document ID
            update_data: Fields to set

        Returns:
            The document after the update, or None if no document matched

        Raises:
            DuplicateKeyError: If a unique index rejects the new values
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return None

        update_data = dict(update_data)
        update_data['updated_at'] = utcnow()

        try:
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            raise self._unavailable("update", e) from e

        if document:
            logger.info(f"Updated document in {self.collection.name}: {doc_id}")
        return self._serialize(document)

    async def delete(self, doc_id: str) -> bool:
        """
        Delete document by ID.

        Args:
            doc_id: Document ID

        Returns:
            True if deleted, False if no document matched
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return False

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._unavailable("delete", e) from e

        if result.deleted_count > 0:
            logger.info(f"Deleted document from {self.collection.name}: {doc_id}")
            return True
        return False
