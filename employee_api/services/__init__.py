"""
Services module - Business logic.

Services contain the application logic:
- No HTTP concerns (those belong in api/)
- No database queries (those belong in database/)
"""
from employee_api.services.employee_service import EmployeeService

__all__ = [
    "EmployeeService",
]
