"""Domain Types — names and constants shared by the contact rules and the store layer.

Invariants:
    - REQUIRED_FIELDS order is the order used in client error messages
    - Stored documents use `_id`; the wire uses `id`
"""

from typing import NewType

from bson import ObjectId


ContactId = NewType("ContactId", ObjectId)

CONTACTS_COLLECTION = "Contacts"

REQUIRED_FIELDS: tuple[str, ...] = (
    "firstName", "lastName", "email", "favoriteColor", "birthday",
)

# Business fields are also the only updatable ones
UPDATABLE_FIELDS = REQUIRED_FIELDS

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"
