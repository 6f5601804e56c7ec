"""Contact Rules — tests for pure identifier parsing, validation and document building.

Tests cover:
    - parse_contact_id distinguishes missing from malformed identifiers
    - check_required_fields / check_email_format
    - build_new_contact stamps createdAt == updatedAt
    - build_update_fields keeps only supplied fields and always sets updatedAt
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from contacts_api.core.contact_rules import (
    parse_contact_id,
    check_required_fields,
    check_email_format,
    build_new_contact,
    build_update_fields,
    store_timestamp,
)
from contacts_api.core.errors import (
    ValidationError,
    MissingIdentifierError,
    InvalidIdentifierError,
    MissingFieldsError,
    InvalidEmailError,
    NoUpdateFieldsError,
)

NOW = datetime(2024, 5, 10, 14, 30, 22, tzinfo=timezone.utc)

VALID = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@x.com",
    "favoriteColor": "blue",
    "birthday": "1990-01-01",
}


# ─── parse_contact_id ────────────────────────────────────────────

def test_parse_contact_id_accepts_object_id_hex():
    oid = ObjectId()
    assert parse_contact_id(str(oid)) == oid


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_contact_id_missing(raw):
    with pytest.raises(MissingIdentifierError) as exc:
        parse_contact_id(raw)
    assert exc.value.http_status == 400
    assert exc.value.code == "MISSING_ID"


@pytest.mark.parametrize("raw", ["not-a-valid-id", "123", "zz" * 12])
def test_parse_contact_id_malformed(raw):
    with pytest.raises(InvalidIdentifierError) as exc:
        parse_contact_id(raw)
    assert exc.value.http_status == 400
    assert exc.value.code == "INVALID_ID"
    assert exc.value.raw_id == raw


def test_missing_and_malformed_are_distinct_validation_errors():
    assert issubclass(MissingIdentifierError, ValidationError)
    assert issubclass(InvalidIdentifierError, ValidationError)
    assert not issubclass(InvalidIdentifierError, MissingIdentifierError)


# ─── store_timestamp ─────────────────────────────────────────────

def test_store_timestamp_truncates_to_milliseconds():
    now = datetime(2024, 5, 10, 14, 30, 22, 123456, tzinfo=timezone.utc)
    assert store_timestamp(now) == now.replace(microsecond=123000)


def test_store_timestamp_keeps_whole_milliseconds():
    assert store_timestamp(NOW) == NOW


# ─── check_required_fields / check_email_format ─────────────────

def test_check_required_fields_passes_complete_payload():
    check_required_fields(VALID)


@pytest.mark.parametrize("field", list(VALID))
def test_check_required_fields_rejects_missing_field(field):
    payload = {k: v for k, v in VALID.items() if k != field}
    with pytest.raises(MissingFieldsError) as exc:
        check_required_fields(payload)
    assert exc.value.missing == [field]
    assert exc.value.message == (
        "All fields are required: firstName, lastName, email, favoriteColor, birthday"
    )


def test_check_required_fields_rejects_empty_string():
    with pytest.raises(MissingFieldsError):
        check_required_fields({**VALID, "lastName": ""})


def test_check_email_format_accepts_minimal_address():
    check_email_format("a@b")


def test_check_email_format_rejects_without_at():
    with pytest.raises(InvalidEmailError) as exc:
        check_email_format("ab")
    assert exc.value.message == "Invalid email format"


# ─── build_new_contact ───────────────────────────────────────────

def test_build_new_contact_stamps_equal_timestamps():
    doc = build_new_contact(VALID, NOW)
    assert doc["createdAt"] == doc["updatedAt"] == NOW
    for field, value in VALID.items():
        assert doc[field] == value


def test_build_new_contact_drops_unknown_fields():
    doc = build_new_contact({**VALID, "_id": "x", "admin": True}, NOW)
    assert "_id" not in doc
    assert "admin" not in doc


def test_build_new_contact_checks_email():
    with pytest.raises(InvalidEmailError):
        build_new_contact({**VALID, "email": "john.x.com"}, NOW)


# ─── build_update_fields ─────────────────────────────────────────

def test_build_update_fields_only_supplied_fields():
    fields = build_update_fields({"firstName": "Jane", "lastName": None}, NOW)
    assert fields == {"firstName": "Jane", "updatedAt": NOW}


def test_build_update_fields_ignores_empty_strings():
    fields = build_update_fields({"firstName": "Jane", "email": ""}, NOW)
    assert "email" not in fields


def test_build_update_fields_requires_at_least_one_field():
    with pytest.raises(NoUpdateFieldsError) as exc:
        build_update_fields({"firstName": "", "createdAt": "2020-01-01"}, NOW)
    assert exc.value.http_status == 400


def test_build_update_fields_checks_supplied_email():
    with pytest.raises(InvalidEmailError):
        build_update_fields({"email": "nope"}, NOW)


def test_build_update_fields_never_touches_created_at():
    fields = build_update_fields({**VALID, "createdAt": NOW}, NOW)
    assert "createdAt" not in fields
    assert fields["updatedAt"] == NOW
