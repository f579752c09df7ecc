"""
Request and Response models for the Employee API.

These Pydantic models define the contract between client and server.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from employee_api.database.repository import EmployeeRecord


class EmployeeResponse(BaseModel):
    """Response model for the /api/employee endpoint."""
    id: int = Field(
        ...,
        description="Store-generated employee identifier",
        examples=[1]
    )
    name: str = Field(
        ...,
        description="Employee name",
        examples=["PrithvirajV"]
    )

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "EmployeeResponse":
        """Map a repository record to the response body."""
        return cls(id=record.id, name=record.name)


class HealthResponse(BaseModel):
    """Response model for the /health endpoints."""
    status: str = Field(default="healthy")
    version: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    message: str
    details: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
