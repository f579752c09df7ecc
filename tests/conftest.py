"""Shared fixtures for the employee API tests."""
import os

# Configure the environment before employee_api reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENABLE_AUDIT_LOGGING"] = "false"
os.environ["APP_ENV"] = "testing"

import pytest
from fastapi.testclient import TestClient

from employee_api.api.main import create_app
from employee_api.database import (
    DatabaseConnection,
    SQLAlchemyEmployeeRepository,
    init_employee_tables,
    seed_employees,
)
from employee_api.services import EmployeeService


@pytest.fixture
def db():
    """A fresh in-memory database with the employee table created."""
    database = DatabaseConnection("sqlite://")
    init_employee_tables(database)
    yield database
    database.close()


@pytest.fixture
def seeded_db(db):
    """Database holding PrithvirajV (id 1) and Jane Doe (id 2)."""
    seed_employees(db, ["PrithvirajV", "Jane Doe"])
    return db


@pytest.fixture
def repository(seeded_db):
    return SQLAlchemyEmployeeRepository(seeded_db)


@pytest.fixture
def service(repository):
    return EmployeeService(repository)


@pytest.fixture
def client(service, seeded_db):
    """Client for an app wired to the seeded database."""
    app = create_app(employee_service=service, database=seeded_db)
    with TestClient(app) as test_client:
        yield test_client
