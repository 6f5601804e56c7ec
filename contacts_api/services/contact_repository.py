"""Contact Repository — the five data operations over the Contacts collection.

Invariants:
    - Every driver failure is mapped to StoreError (500) with a client-safe message
    - find_all returns documents in store order (no sort applied)
    - update_by_id / delete_by_id report whether a document matched

Design Decisions:
    - Repository takes the database handle per request (from get_db), never the
      manager: routes stay testable with an overridden dependency
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from contacts_api.core.domain_types import CONTACTS_COLLECTION, ContactId
from contacts_api.core.errors import StoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _store_errors(operation: str, message: str) -> AsyncGenerator[None, None]:
    try:
        yield
    except PyMongoError as e:
        logger.error(
            f"Store {operation} failed: {e}",
            extra={"operation": operation}, exc_info=True,
        )
        raise StoreError(message, operation)


class ContactRepository:
    """Store access for contacts."""

    def __init__(self, db: AsyncDatabase):
        self.collection = db[CONTACTS_COLLECTION]

    async def find_all(self) -> list[dict]:
        async with _store_errors("find_all", "Failed to fetch contacts"):
            return await self.collection.find({}).to_list(length=None)

    async def find_by_id(self, contact_id: ContactId) -> dict | None:
        async with _store_errors("find_by_id", "Failed to fetch contact"):
            return await self.collection.find_one({"_id": contact_id})

    async def insert(self, document: dict) -> ContactId:
        async with _store_errors("insert", "Failed to create contact"):
            result = await self.collection.insert_one(document)
        return ContactId(result.inserted_id)

    async def update_by_id(self, contact_id: ContactId, fields: dict) -> bool:
        """Apply $set fields. Returns False when no document matched."""
        async with _store_errors("update_by_id", "Failed to update contact"):
            result = await self.collection.update_one(
                {"_id": contact_id}, {"$set": fields},
            )
        return result.matched_count > 0

    async def delete_by_id(self, contact_id: ContactId) -> bool:
        """Hard delete. Returns False when no document matched."""
        async with _store_errors("delete_by_id", "Failed to delete contact"):
            result = await self.collection.delete_one({"_id": contact_id})
        return result.deleted_count > 0
