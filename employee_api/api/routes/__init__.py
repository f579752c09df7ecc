"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- employee.py : Employee lookup by name
- health.py   : Health check endpoints
"""
from employee_api.api.routes.employee import router as employee_router
from employee_api.api.routes.health import router as health_router

__all__ = [
    "employee_router",
    "health_router",
]
