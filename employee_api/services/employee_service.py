"""
Employee Service - Lookup of employees by name.

The service holds no state of its own and adds nothing to the lookup: it
hands the name to its repository and returns whatever comes back. Store
failures propagate to the caller unchanged.
"""
from typing import Optional

from employee_api.core.logging_config import LoggerMixin
from employee_api.database.repository import EmployeeRecord, EmployeeRepository


class EmployeeService(LoggerMixin):
    """
    Service for looking up employees.

    Example:
        >>> service = EmployeeService(SQLAlchemyEmployeeRepository(db))
        >>> service.get_by_name("PrithvirajV")
        EmployeeRecord(id=1, name='PrithvirajV')
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def get_by_name(self, name: str) -> Optional[EmployeeRecord]:
        """
        Get the employee with the given name.

        Args:
            name: Exact employee name

        Returns:
            The employee, or None if no employee has that name
        """
        self.logger.debug(f"Looking up employee by name={name!r}")
        return self.repository.find_by_name(name)
