"""Error Hierarchy — typed, categorized exceptions for EventGraph failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Missing rows on update/delete raise ResourceNotFoundError; reads return None instead
    - Every failure the API reports, including request validation and unexpected
      crashes, is an EventGraphError and serializes through to_response()
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EventGraphError base: one envelope shape for 400, 404 and 500
    - Severity picks the log level in the shell: ERROR → warning, CRITICAL → error
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity — caller mistakes vs. failures of the service itself."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which record an error is about, when it is about one."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None


class EventGraphError(Exception):
    """Base exception for all EventGraph errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(EventGraphError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.entity_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = str(resource_id)


class RequestValidationFailed(EventGraphError):
    """Request body or path failed schema validation.

    `details` holds one {"field", "message", "type"} entry per failing field.
    """
    def __init__(self, details: list[dict], context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class SeedDataError(EventGraphError):
    """Seed file missing or malformed."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Seed data at '{path}' rejected: {message}",
            "SEED_DATA_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, context, 400,
        )
        self.path = path


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(EventGraphError):
    """Unexpected failure; the message never carries the original exception text."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
