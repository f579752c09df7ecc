"""
Custom Exceptions - Application-specific error classes.

Each exception carries the HTTP status code and error code the API layer
uses to build a consistent JSON error response.
"""
from typing import Optional


class EmployeeAPIException(Exception):
    """
    Base exception for all employee API errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details
        }


class EmployeeNotFoundError(EmployeeAPIException):
    """Raised when no employee matches the requested name."""
    status_code = 404
    error_code = "employee_not_found"

    def __init__(self, name: str):
        super().__init__(
            message=f"Employee not found: {name!r}",
            details=f"name={name}"
        )
        self.name = name


class DatabaseError(EmployeeAPIException):
    """Raised when the record store cannot be queried."""
    status_code = 503
    error_code = "database_error"

    def __init__(self, message: str = "Database operation failed", details: Optional[str] = None):
        super().__init__(message, details)
