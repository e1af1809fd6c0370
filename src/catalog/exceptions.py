"""Custom exceptions for the GearRate catalog.

Every failure the catalog reports derives from CatalogError, which carries
the HTTP status code the API layer answers with.
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Base exception for GearRate catalog errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code for API responses
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class ValidationError(CatalogError):
    """Raised when input is malformed or breaks a taxonomy invariant."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, status_code=422, details=details)


class DuplicateError(CatalogError):
    """Raised when creating an entity whose identifier is already taken."""

    def __init__(self, kind: str, name: str):
        message = f"{kind.capitalize()} '{name}' already exists"
        super().__init__(
            message=message,
            status_code=409,
            details={"kind": kind, "name": name},
        )


class NotFoundError(CatalogError):
    """Raised when an operation addresses an entity that does not exist."""

    def __init__(self, kind: str, name: str):
        message = f"{kind.capitalize()} '{name}' not found"
        super().__init__(
            message=message,
            status_code=404,
            details={"kind": kind, "name": name},
        )
