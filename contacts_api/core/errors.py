"""Error Hierarchy — typed, categorized exceptions for all contacts failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; store errors (500) are critical
    - to_response() always carries an `error` string for the client
    - No driver details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContactsError base: FastAPI global handler catches all
    - Malformed identifiers get their own code (INVALID_ID) so they stay
      distinguishable from other 400s and from NOT_FOUND
"""

from enum import Enum

from contacts_api.core.domain_types import REQUIRED_FIELDS


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE = "store"
    INTERNAL = "internal"


class ContactsError(Exception):
    """Base exception for all contacts service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(ContactsError):
    """Missing or malformed required input."""
    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class MissingIdentifierError(ValidationError):
    def __init__(self):
        super().__init__("Missing id parameter", "MISSING_ID")


class InvalidIdentifierError(ValidationError):
    """Identifier is present but cannot be parsed into a store id."""
    def __init__(self, raw_id: str):
        super().__init__("Invalid ID format", "INVALID_ID")
        self.raw_id = raw_id


class MissingFieldsError(ValidationError):
    def __init__(self, missing: list[str]):
        super().__init__(
            f"All fields are required: {', '.join(REQUIRED_FIELDS)}",
            "MISSING_FIELDS",
        )
        self.missing = missing


class InvalidEmailError(ValidationError):
    def __init__(self):
        super().__init__("Invalid email format", "INVALID_EMAIL")


class NoUpdateFieldsError(ValidationError):
    def __init__(self):
        super().__init__(
            "At least one field must be provided for update",
            "NO_UPDATE_FIELDS",
        )


class NotFoundError(ContactsError):
    """Identifier is well-formed but no document matches."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(ContactsError):
    """Data-access call against the document store failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class StoreConnectionError(ContactsError):
    """Connecting to the store at boot failed. Fatal."""
    def __init__(self, message: str):
        super().__init__(
            f"Document store connection failed: {message}",
            "STORE_CONNECTION_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, 500,
        )


class StoreUninitializedError(ContactsError):
    """Store handle requested before initialize() succeeded."""
    def __init__(self):
        super().__init__(
            "Document store not initialized. Call initialize() first.",
            "STORE_UNINITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
