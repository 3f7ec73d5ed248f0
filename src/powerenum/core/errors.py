"""Custom exceptions and error response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standardized error response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class AppError(Exception):
    """Base exception for all powerenum errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to API response schema."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class InvalidNameError(AppError, ValueError):
    """Raised when a name does not match any member of an enum."""

    def __init__(self, name: str, enum: str):
        self.name = name
        self.enum = enum
        super().__init__(
            code="INVALID_NAME",
            message=f'"{name}" is not a valid backing name for enum "{enum}"',
            status_code=422,
            details={"name": name, "enum": enum},
        )


class ValidationError(AppError):
    """Raised when a value fails an enum validation rule."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=422,
            details=details,
        )


class NoRequestError(AppError):
    """Raised when request binding runs outside of a request."""

    def __init__(self, message: str = "No active request to bind from"):
        super().__init__(
            code="NO_REQUEST",
            message=message,
            status_code=500,
        )
