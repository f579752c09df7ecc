"""
Employee Lookup API root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI application factory and routes
- core/      : Configuration, logging, exceptions, and middleware
- services/  : Business logic (employee lookup)
- database/  : Engine/session management, ORM models, repositories
- models/    : Pydantic models for response schemas
"""

__version__ = "0.1.0"
