# access_tokens/domain/exceptions.py

"""
Custom exceptions for the application.

This module defines the pure domain exceptions. They carry an
``internal_code`` that the exception middleware maps to an HTTP status,
so the domain never depends on the web framework.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule: which field and why."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class DomainException(Exception):
    """
    Base exception for every application error.
    """

    def __init__(
            self,
            detail: Any = None,
            internal_code: Optional[str] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.internal_code = internal_code


class InvalidInputException(DomainException):
    """Malformed or out-of-range client input."""

    def __init__(self, detail: str = "Validation failed", details: Optional[List[FieldError]] = None):
        super().__init__(detail=detail, internal_code="VALIDATION_ERROR")
        self.details = list(details or [])

    def __str__(self) -> str:
        fields = ", ".join(f"{e.field}: {e.message}" for e in self.details)
        return f"{self.detail}: {fields}" if fields else str(self.detail)


class InvalidCredentialsException(DomainException):
    """Missing or incorrect API key."""

    def __init__(self, detail: str = "Unauthorized. Valid X-API-Key header required."):
        super().__init__(detail=detail, internal_code="INVALID_CREDENTIALS")


class ResourceAlreadyExistsException(DomainException):
    """Unique constraint violation in the store."""

    def __init__(self, detail: str = "Resource already exists", original_error: Optional[Exception] = None):
        error_info = f": {original_error}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}", internal_code="RESOURCE_ALREADY_EXISTS")
        self.original_error = original_error


class DatabaseOperationException(DomainException):
    """Store unavailable or failed to execute an operation."""

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        error_info = f": {original_error}" if original_error else ""
        super().__init__(detail=f"{detail}{error_info}", internal_code="DATABASE_OPERATION_ERROR")
        self.original_error = original_error
