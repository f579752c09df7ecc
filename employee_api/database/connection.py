"""
Database Connection Management.

This module handles the relational store connection via SQLAlchemy.
It provides:
- Connection pooling
- Session management
- Health checks

Any SQLAlchemy URL works; SQLite (file or in-memory) is the local default,
MySQL and PostgreSQL are supported through their drivers.
"""
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from employee_api.core.config import get_settings
from employee_api.core.logging_config import get_logger

logger = get_logger(__name__)


def _engine_options(db_url: str) -> Dict[str, Any]:
    """
    Build create_engine keyword arguments for the given URL.

    SQLite connections are shared across the server's worker threads, and
    an in-memory database must live on a single connection or each thread
    would see its own empty database.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    # pool_pre_ping: Test connections before using (handles stale connections)
    # pool_size: Number of connections to keep open
    # max_overflow: Additional connections allowed under load
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    }


class DatabaseConnection:
    """
    Manages database connections and session lifecycle.

    Example:
        >>> db = DatabaseConnection("sqlite://")
        >>> with db.get_session() as session:
        ...     result = session.execute(text("SELECT 1"))
    """

    def __init__(self, connection_url: Optional[str] = None):
        """
        Initialize database engine with connection pooling.

        No connection is opened until the first session is used.

        Args:
            connection_url: Optional connection URL. If not provided, uses settings.
        """
        db_url = connection_url or get_settings().database_url

        self.engine = create_engine(
            db_url,
            echo=False,  # Set True to log all SQL (very verbose)
            **_engine_options(db_url),
        )

        self._session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
        )

        logger.info(f"Database connection initialized: {self.engine.url.render_as_string(hide_password=True)}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with automatic cleanup.

        Usage:
            with db.get_session() as session:
                employee = session.get(Employee, 1)

        Transactions are rolled back on error, committed on success.

        Yields:
            SQLAlchemy Session object
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error, rolling back: {e}")
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        """
        Test database connectivity.

        Returns:
            True if connection is healthy, False otherwise.
        """
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            logger.debug("Database connection check: OK")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def close(self) -> None:
        """Close all connections in the pool."""
        self.engine.dispose()
        logger.info("Database connections closed")
