"""
Models module - Pydantic schemas for API responses.
"""
from employee_api.models.employee import (
    EmployeeResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "EmployeeResponse",
    "HealthResponse",
    "ErrorResponse",
]
