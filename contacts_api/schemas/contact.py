"""Contact Schemas — Pydantic models for the contacts HTTP surface.

Invariants:
    - Request models accept every business field as optional: presence and
      format are checked by core/contact_rules.py so the client sees one
      consistent message per rule
    - Response ids are strings; stored `_id` is renamed to `id`
    - Stored business fields of any type are returned as text, never rejected
    - Unknown request fields are ignored, never persisted

Design Decisions:
    - camelCase field names kept on the wire and in storage (one vocabulary end to end)
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactCreate(BaseModel):
    """Create payload: all five business fields are required by the handler."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "John",
                "lastName": "Doe",
                "email": "john.doe@example.com",
                "favoriteColor": "blue",
                "birthday": "1990-01-01",
            },
        },
    )

    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    favoriteColor: str | None = None
    birthday: str | None = Field(None, description="Calendar date, e.g. 1990-01-01")


class ContactUpdate(BaseModel):
    """Partial update: only supplied, non-empty fields are applied."""
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    favoriteColor: str | None = None
    birthday: str | None = None


class ContactResponse(BaseModel):
    """A stored contact as returned to clients."""
    id: str
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    favoriteColor: str | None = None
    birthday: str | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @field_validator(
        "firstName", "lastName", "email", "favoriteColor", "birthday", mode="before",
    )
    @classmethod
    def stringify_stored_value(cls, v):
        """Older writers stored any non-empty JSON value; render it as text."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (datetime, date)):
            return v.isoformat()
        return str(v)

    @classmethod
    def from_document(cls, document: dict) -> "ContactResponse":
        data = {k: v for k, v in document.items() if k not in ("_id", "id")}
        return cls(id=str(document["_id"]), **data)


class ContactCreatedResponse(BaseModel):
    id: str
    message: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    code: str | None = None
