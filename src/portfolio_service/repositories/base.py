"""Shared CRUD operations over a single MongoDB collection."""

import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo import DESCENDING, ReturnDocument

from ..database import MongoDatabase, store_errors
from ..models.document import RecordRef

logger = logging.getLogger("content_repository")


def utc_now() -> datetime:
    """Current UTC time at the millisecond precision BSON stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_object_id(record_id: str) -> Optional[ObjectId]:
    """Parse a record id, returning None when it is not a valid ObjectId."""
    try:
        return ObjectId(record_id)
    except (InvalidId, TypeError):
        return None


class DocumentRepository:
    """Repository for one entity kind stored in one collection.

    Subclasses set the collection name, the stored model and the sort
    order used for newest-first listings.
    """

    collection_name: ClassVar[str]
    model: ClassVar[type[BaseModel]]
    label: ClassVar[str]
    sort_order: ClassVar[list[tuple[str, int]]] = [("_id", DESCENDING)]

    @classmethod
    async def collection(cls) -> Any:
        return await MongoDatabase.get_collection(cls.collection_name)

    @classmethod
    def to_model(cls, document: dict) -> BaseModel:
        """Convert a raw Mongo document into the stored model."""
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return cls.model.model_validate(data)

    @classmethod
    async def list_all(cls) -> list[BaseModel]:
        """List all records, newest first."""
        collection = await cls.collection()
        async with store_errors(f"fetch {cls.label}s"):
            documents = await collection.find({}).sort(cls.sort_order).to_list(length=None)
        return [cls.to_model(doc) for doc in documents]

    @classmethod
    async def get_by_id(cls, record_id: str) -> Optional[BaseModel]:
        """Get a record by ID."""
        object_id = to_object_id(record_id)
        if object_id is None:
            return None

        collection = await cls.collection()
        async with store_errors(f"fetch {cls.label}"):
            document = await collection.find_one({"_id": object_id})
        return cls.to_model(document) if document else None

    @classmethod
    async def create(cls, data: BaseModel) -> BaseModel:
        """Insert a new record and return it with its generated id."""
        now = utc_now()
        document = {**data.model_dump(), "created_at": now, "updated_at": now}

        collection = await cls.collection()
        async with store_errors(f"create {cls.label}"):
            result = await collection.insert_one(document)

        document["_id"] = result.inserted_id
        logger.info(f"Created {cls.label} {result.inserted_id}")
        return cls.to_model(document)

    @classmethod
    async def update(cls, data: RecordRef) -> Optional[BaseModel]:
        """Replace the supplied fields of a record.

        Fields left out of ``data`` (or set to None) keep their stored
        values. Returns None when no record has the given id.
        """
        object_id = to_object_id(data.id)
        if object_id is None:
            return None

        updates = {
            k: v for k, v in data.model_dump(exclude={"id"}).items() if v is not None
        }
        if not updates:
            return await cls.get_by_id(data.id)

        updates["updated_at"] = utc_now()

        collection = await cls.collection()
        async with store_errors(f"update {cls.label}"):
            document = await collection.find_one_and_update(
                {"_id": object_id},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )

        if not document:
            return None
        logger.info(f"Updated {cls.label} {data.id}: {', '.join(sorted(updates))}")
        return cls.to_model(document)

    @classmethod
    async def delete(cls, record_id: str) -> bool:
        """Delete a record. Returns whether anything was removed."""
        object_id = to_object_id(record_id)
        if object_id is None:
            return False

        collection = await cls.collection()
        async with store_errors(f"delete {cls.label}"):
            result = await collection.delete_one({"_id": object_id})

        if result.deleted_count:
            logger.info(f"Deleted {cls.label} {record_id}")
        return result.deleted_count > 0
