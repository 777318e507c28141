"""About repository."""

import logging
from pymongo import ReturnDocument

from ..database import store_errors
from ..models.about import About, DEFAULT_ABOUT
from .base import DocumentRepository, utc_now

logger = logging.getLogger("content_repository")


class AboutRepository(DocumentRepository):
    """Repository for About records.

    The collection may hold several records but the public site only
    shows the newest one.
    """

    collection_name = "abouts"
    model = About
    label = "about"

    @classmethod
    async def get_current(cls) -> About:
        """Return the newest About record, seeding the default if none exist.

        The seed is an upsert against an empty match, so a concurrent or
        repeated first read still leaves exactly one default record.
        """
        collection = await cls.collection()
        async with store_errors("fetch about information"):
            document = await collection.find_one({}, sort=cls.sort_order)
            if document is None:
                now = utc_now()
                document = await collection.find_one_and_update(
                    {},
                    {
                        "$setOnInsert": {
                            **DEFAULT_ABOUT.model_dump(),
                            "created_at": now,
                            "updated_at": now,
                        }
                    },
                    sort=cls.sort_order,
                    upsert=True,
                    return_document=ReturnDocument.AFTER,
                )
                logger.info("Seeded default about record")

        return cls.to_model(document)
