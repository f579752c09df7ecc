"""Tests for the SQLAlchemy employee repository."""
import pytest

from employee_api.core.exceptions import DatabaseError
from employee_api.database import (
    DatabaseConnection,
    EmployeeRecord,
    SQLAlchemyEmployeeRepository,
    seed_employees,
)


def test_find_by_name_returns_matching_record(repository):
    """Test that an exact name match returns the stored record."""
    assert repository.find_by_name("PrithvirajV") == EmployeeRecord(id=1, name="PrithvirajV")
    assert repository.find_by_name("Jane Doe") == EmployeeRecord(id=2, name="Jane Doe")


def test_find_by_name_returns_none_when_absent(repository):
    assert repository.find_by_name("Nobody") is None


def test_find_by_name_is_exact(repository):
    """Test that the name is not trimmed or case folded."""
    assert repository.find_by_name("prithvirajv") is None
    assert repository.find_by_name(" PrithvirajV") is None
    assert repository.find_by_name("Prithviraj") is None


def test_find_by_name_empty_string(repository):
    assert repository.find_by_name("") is None


def test_find_by_name_passes_special_characters_through(db):
    """Test that quotes and wildcards are matched literally."""
    seed_employees(db, ["O'Brien", "100%_match"])
    repo = SQLAlchemyEmployeeRepository(db)

    assert repo.find_by_name("O'Brien").name == "O'Brien"
    assert repo.find_by_name("100%_match").name == "100%_match"
    assert repo.find_by_name("100%") is None
    assert repo.find_by_name("' OR '1'='1") is None


def test_find_by_name_duplicate_names_returns_lowest_id(db):
    seed_employees(db, ["Alex", "Sam", "Alex"])
    repo = SQLAlchemyEmployeeRepository(db)

    assert repo.find_by_name("Alex") == EmployeeRecord(id=1, name="Alex")


def test_find_by_name_is_repeatable(repository):
    """Test that reading does not change what later reads return."""
    first = repository.find_by_name("PrithvirajV")
    second = repository.find_by_name("PrithvirajV")
    assert first == second


def test_find_by_name_raises_database_error_when_store_unreachable(tmp_path):
    missing = tmp_path / "missing-dir" / "employees.db"
    db = DatabaseConnection(f"sqlite:///{missing}")
    repo = SQLAlchemyEmployeeRepository(db)

    with pytest.raises(DatabaseError) as exc_info:
        repo.find_by_name("PrithvirajV")

    assert exc_info.value.status_code == 503
    assert exc_info.value.__cause__ is not None
    db.close()


def test_find_by_name_raises_database_error_when_table_missing():
    db = DatabaseConnection("sqlite://")
    repo = SQLAlchemyEmployeeRepository(db)

    with pytest.raises(DatabaseError):
        repo.find_by_name("PrithvirajV")
    db.close()
