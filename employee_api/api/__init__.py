"""
API module - FastAPI application and HTTP handling.

This module handles:
- Application wiring (create_app)
- Query parameter parsing
- Response formatting
- Error handling
"""
from employee_api.api.main import app, create_app

__all__ = ["app", "create_app"]
