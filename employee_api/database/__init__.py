"""
Database module - Relational store access layer.

This module handles:
- Database connection management
- The employee ORM model
- Lookup of employees by name
- Table creation and seeding
"""
from employee_api.database.connection import DatabaseConnection
from employee_api.database.models import Employee, Base
from employee_api.database.repository import (
    EmployeeRecord,
    EmployeeRepository,
    SQLAlchemyEmployeeRepository,
)
from employee_api.database.init_db import (
    init_employee_tables,
    drop_employee_tables,
    seed_employees,
)

__all__ = [
    # Connection
    "DatabaseConnection",
    # Models
    "Employee",
    "Base",
    # Repository
    "EmployeeRecord",
    "EmployeeRepository",
    "SQLAlchemyEmployeeRepository",
    # Init
    "init_employee_tables",
    "drop_employee_tables",
    "seed_employees",
]
