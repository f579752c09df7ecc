"""
Employee Repository - Read access to the employee table.

The repository is the only layer that talks to the database. It exposes a
single capability, looking an employee up by name, behind an abstract base
class so the service can be given any implementation (the SQLAlchemy one in
production, a mock in tests).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from employee_api.core.exceptions import DatabaseError
from employee_api.core.logging_config import get_logger
from employee_api.database.connection import DatabaseConnection
from employee_api.database.models import Employee

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmployeeRecord:
    """
    An employee as seen by the service and API layers.

    Attributes:
        id: Store-generated identifier
        name: Employee name (not unique)
    """
    id: int
    name: str

    @classmethod
    def from_model(cls, employee: Employee) -> "EmployeeRecord":
        return cls(id=employee.id, name=employee.name)


class EmployeeRepository(ABC):
    """Lookup-by-name capability over an employee store."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[EmployeeRecord]:
        """
        Find the first employee whose name equals ``name`` exactly.

        Returns:
            The matching record, or None if there is none
        """


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    """
    Employee repository backed by a relational database.

    The name is passed to the query unchanged: no trimming, no case folding,
    no validation. When several rows share a name the one with the lowest
    id is returned.

    Example:
        >>> repo = SQLAlchemyEmployeeRepository(DatabaseConnection("sqlite://"))
        >>> repo.find_by_name("PrithvirajV")
        EmployeeRecord(id=1, name='PrithvirajV')
    """

    def __init__(self, db: DatabaseConnection):
        self.db = db

    def find_by_name(self, name: str) -> Optional[EmployeeRecord]:
        try:
            with self.db.get_session() as session:
                employee = (
                    session.query(Employee)
                    .filter(Employee.name == name)
                    .order_by(Employee.id)
                    .first()
                )
                # Copy out while the session is open; instances expire on commit
                record = EmployeeRecord.from_model(employee) if employee else None
        except SQLAlchemyError as e:
            logger.error(f"Employee lookup failed for name={name!r}: {e}")
            raise DatabaseError(
                "Employee store is unavailable",
                details=type(e).__name__,
            ) from e

        logger.debug(f"Employee lookup name={name!r} found={record is not None}")
        return record
