"""Tests for table creation, seeding and the init_db command."""
from employee_api.database import (
    DatabaseConnection,
    EmployeeRecord,
    SQLAlchemyEmployeeRepository,
    drop_employee_tables,
    init_employee_tables,
    seed_employees,
)
from employee_api.database.init_db import main


def test_seed_employees_assigns_ids_in_order(db):
    records = seed_employees(db, ["PrithvirajV", "Jane Doe"])

    assert records == [
        EmployeeRecord(id=1, name="PrithvirajV"),
        EmployeeRecord(id=2, name="Jane Doe"),
    ]


def test_init_employee_tables_is_idempotent(seeded_db):
    init_employee_tables(seeded_db)

    repo = SQLAlchemyEmployeeRepository(seeded_db)
    assert repo.find_by_name("PrithvirajV") is not None


def test_drop_employee_tables_removes_rows(seeded_db):
    drop_employee_tables(seeded_db)
    init_employee_tables(seeded_db)

    repo = SQLAlchemyEmployeeRepository(seeded_db)
    assert repo.find_by_name("PrithvirajV") is None


def test_main_creates_and_seeds_file_database(tmp_path, capsys):
    url = f"sqlite:///{tmp_path / 'employees.db'}"

    main(["--database-url", url, "--seed", "PrithvirajV", "Jane Doe"])

    assert "1: PrithvirajV" in capsys.readouterr().out
    db = DatabaseConnection(url)
    assert SQLAlchemyEmployeeRepository(db).find_by_name("Jane Doe") == EmployeeRecord(id=2, name="Jane Doe")
    db.close()


def test_main_reset_drops_existing_rows(tmp_path):
    url = f"sqlite:///{tmp_path / 'employees.db'}"
    main(["--database-url", url, "--seed", "Old Name"])

    main(["--database-url", url, "--reset", "--seed", "PrithvirajV"])

    db = DatabaseConnection(url)
    repo = SQLAlchemyEmployeeRepository(db)
    assert repo.find_by_name("Old Name") is None
    assert repo.find_by_name("PrithvirajV") == EmployeeRecord(id=1, name="PrithvirajV")
    db.close()
