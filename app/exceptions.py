# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ParishAPIException(Exception):
    """
    Base exception for the parish API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PARISH_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class ValidationFailedError(ParishAPIException):
    """Raised when a request payload fails schema validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            message="Invalid request data",
            code="VALIDATION_FAILED",
            status_code=400,
            suggestion="Fix the listed fields and submit again",
            details={"errors": errors},
        )
        self.errors = errors


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into field-level details.

    Example:
        [{"field": "name", "message": "String should have at least 1 character",
          "type": "string_too_short"}]
    """
    formatted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        formatted.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        })
    return formatted


# =============================================================================
# Intention Exceptions
# =============================================================================

class PersistenceFailedError(ParishAPIException):
    """Raised when the intention store cannot complete an operation."""

    def __init__(self, operation: str, error: str):
        messages = {
            "create": "Failed to save prayer intention",
            "list": "Failed to fetch prayer intentions",
        }
        super().__init__(
            message=messages.get(operation, "Storage operation failed"),
            code="PERSISTENCE_FAILED",
            status_code=500,
            suggestion="Try again later or contact the parish office if the issue persists",
            details={"operation": operation, "error": error},
        )


# =============================================================================
# Chat Exceptions
# =============================================================================

CHAT_FALLBACK_MESSAGE = (
    "I'm sorry, I'm having trouble responding right now. "
    "Please try again in a moment, or contact the parish office directly."
)


class GenerationFailedError(ParishAPIException):
    """Raised when the text-generation upstream fails."""

    def __init__(self, error: str):
        super().__init__(
            message="Failed to process chat message",
            code="GENERATION_FAILED",
            status_code=500,
            suggestion=CHAT_FALLBACK_MESSAGE,
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def parish_exception_handler(
    request: Request,
    exc: ParishAPIException
) -> JSONResponse:
    """
    Convert ParishAPIException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request parsing errors raised by FastAPI (malformed JSON, wrong body type).

    Reported the same way as schema failures inside the services.
    """
    error = ValidationFailedError(format_validation_errors(list(exc.errors())))
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )
