"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable per request; store errors are critical
    - to_response() produces the REST envelope with "error" as a plain string
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PizzeriaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


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
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class PizzeriaError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message, "code": self.code}


# ─── Domain Errors ──────────────────────────────────────────────

class ResourceNotFoundError(PizzeriaError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class EmptyCatalogError(PizzeriaError):
    """No pizza types exist, so nothing can be selected."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "The catalog has no pizza types",
            "EMPTY_CATALOG", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class ReferentialGapError(PizzeriaError):
    """A cross-entity reference cannot be resolved."""
    def __init__(
        self,
        entity: str,
        missing_id: str,
        referenced_by: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{entity} '{missing_id}' referenced by {referenced_by} does not exist",
            "REFERENTIAL_GAP", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.ERROR, context, 500,
        )
        self.entity = entity
        self.missing_id = missing_id
        self.referenced_by = referenced_by


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreUnavailableError(PizzeriaError):
    """Backing store could not be opened. Fatal at startup."""
    def __init__(self, backend: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Catalog store '{backend}' unavailable: {reason}",
            "STORE_UNAVAILABLE", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.backend = backend
        self.reason = reason


class DatabaseError(PizzeriaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
