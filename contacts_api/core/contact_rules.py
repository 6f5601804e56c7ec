"""Contact Rules — pure validation and document construction for the contacts resource.

Invariants:
    - All rules run before any store access
    - A field counts as supplied only when present and non-empty
    - email must contain "@" wherever it is written (create and update)
    - createdAt == updatedAt on a new contact; update always refreshes updatedAt
    - Functions never read the clock: callers pass `now`
    - Timestamps are kept at millisecond precision (store_timestamp)

Design Decisions:
    - Rules raise typed ValidationError subclasses instead of returning error dicts:
      the global error handler owns the status/body mapping
"""

from datetime import datetime

from bson import ObjectId
from bson.errors import InvalidId

from contacts_api.core.domain_types import (
    ContactId, REQUIRED_FIELDS, UPDATABLE_FIELDS, CREATED_AT, UPDATED_AT,
)
from contacts_api.core.errors import (
    MissingIdentifierError, InvalidIdentifierError, MissingFieldsError,
    InvalidEmailError, NoUpdateFieldsError,
)


def _is_supplied(value) -> bool:
    return value is not None and value != ""


def parse_contact_id(raw: str | None) -> ContactId:
    """Parse a wire identifier into a store id.

    Missing and malformed identifiers are reported as different errors
    even though both map to 400.
    """
    if not _is_supplied(raw):
        raise MissingIdentifierError()
    try:
        return ContactId(ObjectId(raw))
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(raw)


def store_timestamp(now: datetime) -> datetime:
    """Truncate to the millisecond precision BSON dates keep.

    Values handed back to clients then match what a later read returns.
    """
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def check_required_fields(payload: dict) -> None:
    missing = [f for f in REQUIRED_FIELDS if not _is_supplied(payload.get(f))]
    if missing:
        raise MissingFieldsError(missing)


def check_email_format(email: str) -> None:
    """Only format check performed: the address must contain "@"."""
    if "@" not in email:
        raise InvalidEmailError()


def build_new_contact(payload: dict, now: datetime) -> dict:
    """Validate a create payload and return the document to insert."""
    check_required_fields(payload)
    check_email_format(payload["email"])
    document = {field: payload[field] for field in REQUIRED_FIELDS}
    document[CREATED_AT] = now
    document[UPDATED_AT] = now
    return document


def build_update_fields(payload: dict, now: datetime) -> dict:
    """Return the $set fields for a partial update.

    Only supplied business fields are included; updatedAt always is.
    """
    fields = {
        f: payload[f] for f in UPDATABLE_FIELDS if _is_supplied(payload.get(f))
    }
    if not fields:
        raise NoUpdateFieldsError()
    if "email" in fields:
        check_email_format(fields["email"])
    fields[UPDATED_AT] = now
    return fields
