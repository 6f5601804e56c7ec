"""Contacts Routes — list, get, create, update and delete over the Contacts collection.

Invariants:
    - Every handler validates its input before touching the store
    - Missing id → 400, malformed id → 400 (INVALID_ID), absent document → 404
    - Create stamps createdAt == updatedAt; update always refreshes updatedAt
    - Delete responds 204 with an empty body
    - Handlers raise typed errors; api/error_handlers.py builds the error body

Design Decisions:
    - Single-contact lookup stays on GET /contact?id=X for existing clients
    - PUT/DELETE on the bare collection path answer 400 "Missing id parameter"
      instead of a 405 from the router
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, Response, status
from pymongo.asynchronous.database import AsyncDatabase

from contacts_api.core.contact_rules import (
    parse_contact_id, build_new_contact, build_update_fields, store_timestamp,
)
from contacts_api.core.errors import MissingIdentifierError, NotFoundError
from contacts_api.infrastructure.database import get_db
from contacts_api.schemas.contact import (
    ContactCreate, ContactUpdate, ContactResponse,
    ContactCreatedResponse, MessageResponse, ErrorResponse,
)
from contacts_api.services.contact_repository import ContactRepository

logger = logging.getLogger(__name__)
router = APIRouter(tags=["contacts"])

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Missing or invalid input"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Contact not found"}}
_SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Server error"}}


def get_contact_repository(db: AsyncDatabase = Depends(get_db)) -> ContactRepository:
    return ContactRepository(db)


def _now() -> datetime:
    return store_timestamp(datetime.now(timezone.utc))


@router.get(
    "/contacts",
    response_model=list[ContactResponse],
    summary="Returns the list of all contacts",
    responses={**_SERVER_ERROR},
)
async def list_contacts(repo: ContactRepository = Depends(get_contact_repository)):
    documents = await repo.find_all()
    return [ContactResponse.from_document(d) for d in documents]


@router.get(
    "/contact",
    response_model=ContactResponse,
    summary="Get a contact by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def get_contact(
    raw_id: str | None = Query(None, alias="id", description="The contact id"),
    repo: ContactRepository = Depends(get_contact_repository),
):
    contact_id = parse_contact_id(raw_id)
    document = await repo.find_by_id(contact_id)
    if document is None:
        raise NotFoundError("Contact", str(contact_id))
    return ContactResponse.from_document(document)


@router.post(
    "/contacts",
    response_model=ContactCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new contact",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
async def create_contact(
    body: ContactCreate,
    repo: ContactRepository = Depends(get_contact_repository),
):
    document = build_new_contact(body.model_dump(), _now())
    contact_id = await repo.insert(document)
    logger.info("Contact created", extra={"contact_id": str(contact_id)})
    return ContactCreatedResponse(
        id=str(contact_id), message="Contact created successfully",
    )


@router.put(
    "/contacts/{contact_id}",
    response_model=MessageResponse,
    summary="Update a contact by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def update_contact(
    contact_id: str,
    body: ContactUpdate,
    repo: ContactRepository = Depends(get_contact_repository),
):
    parsed_id = parse_contact_id(contact_id)
    fields = build_update_fields(body.model_dump(), _now())
    if not await repo.update_by_id(parsed_id, fields):
        raise NotFoundError("Contact", contact_id)
    logger.info("Contact updated", extra={"contact_id": contact_id})
    return MessageResponse(message="Contact updated successfully")


@router.delete(
    "/contacts/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a contact by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_contact(
    contact_id: str,
    repo: ContactRepository = Depends(get_contact_repository),
):
    parsed_id = parse_contact_id(contact_id)
    if not await repo.delete_by_id(parsed_id):
        raise NotFoundError("Contact", contact_id)
    logger.info("Contact deleted", extra={"contact_id": contact_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/contacts", include_in_schema=False)
@router.put("/contacts/", include_in_schema=False)
@router.delete("/contacts", include_in_schema=False)
@router.delete("/contacts/", include_in_schema=False)
async def reject_missing_contact_id():
    raise MissingIdentifierError()
