"""
Database Models - SQLAlchemy ORM models for the employee store.

The ``employee`` table is normally owned and seeded by an external process;
``init_db`` can create it for local development and tests.
"""
from typing import Any, Dict

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Employee(Base):
    """
    A single employee row.

    Names are indexed for lookup but not unique.
    """
    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True, index=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
        }

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name!r}>"
