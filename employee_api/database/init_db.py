"""
Database initialization and seeding.

This module creates the employee table and inserts employee rows for local
development and tests. In production the table is owned by an external
process and this module is not needed.

Usage:
    # Create the table
    python -m employee_api.database.init_db

    # Drop and recreate the table
    python -m employee_api.database.init_db --reset

    # Create the table and add employees
    python -m employee_api.database.init_db --seed PrithvirajV "Jane Doe"
"""
import argparse
from typing import Iterable, List, Optional

from employee_api.core.config import get_settings
from employee_api.core.logging_config import get_logger, setup_logging
from employee_api.database.connection import DatabaseConnection
from employee_api.database.models import Base, Employee
from employee_api.database.repository import EmployeeRecord

logger = get_logger(__name__)


def init_employee_tables(db: DatabaseConnection) -> None:
    """
    Create the employee table if it doesn't exist.

    Args:
        db: Connection whose engine the table is created on
    """
    try:
        Base.metadata.create_all(db.engine)
        logger.info("Employee tables initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize employee tables: {e}")
        raise


def drop_employee_tables(db: DatabaseConnection) -> None:
    """Drop the employee table (use with caution!)."""
    try:
        Base.metadata.drop_all(db.engine)
        logger.warning("Employee tables dropped")
    except Exception as e:
        logger.error(f"Failed to drop employee tables: {e}")
        raise


def seed_employees(db: DatabaseConnection, names: Iterable[str]) -> List[EmployeeRecord]:
    """
    Insert one employee row per name, in order.

    Duplicate names are inserted as separate rows; the store does not
    enforce name uniqueness.

    Args:
        db: Target database
        names: Employee names to insert

    Returns:
        The inserted records with their store-generated ids
    """
    with db.get_session() as session:
        employees = [Employee(name=name) for name in names]
        session.add_all(employees)
        session.flush()
        records = [EmployeeRecord.from_model(e) for e in employees]

    logger.info(f"Seeded {len(records)} employee(s)")
    return records


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Initialize the employee database")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop the employee table before creating it",
    )
    parser.add_argument(
        "--seed",
        nargs="+",
        metavar="NAME",
        default=[],
        help="Employee names to insert",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir, settings.log_to_file)

    db = DatabaseConnection(args.database_url)
    try:
        if args.reset:
            drop_employee_tables(db)
        init_employee_tables(db)
        for record in seed_employees(db, args.seed):
            print(f"  {record.id}: {record.name}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
