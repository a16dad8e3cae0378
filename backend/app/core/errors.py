"""Error Hierarchy — typed, categorized exceptions for all API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400) are never retried; upstream errors (502) are never retried either
    - to_response() produces the stable {"error": true, "message": ...} envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TutorError base: FastAPI global handler catches all (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - UpstreamError is raised by the provider client and usually swallowed by the chat
      service; it only reaches the global handler in strict mode
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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    endpoint: str | None = None
    model: str | None = None
    debug_info: dict[str, Any] | None = None


class TutorError(Exception):
    """Base exception for all API errors."""

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
        """Convert to the client-facing error envelope."""
        return {"error": True, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(TutorError):
    """Missing or malformed request input."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


# ─── Upstream Errors (500-level) ────────────────────────────────

class UpstreamError(TutorError):
    """AI provider call failed or returned an unusable response."""

    PUBLIC_MESSAGE = "AI service unavailable"

    def __init__(
        self,
        message: str,
        api_error_type: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.api_error_type = api_error_type

    def to_response(self) -> dict:
        """Provider detail stays in the logs."""
        return {"error": True, "message": self.PUBLIC_MESSAGE}
