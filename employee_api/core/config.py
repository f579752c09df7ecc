"""
Configuration management via environment variables.

This module loads configuration from a .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Database selection, in priority order:
1. DATABASE_URL - any SQLAlchemy URL
2. DB_HOST (+ DB_PORT, DB_USER, DB_PASSWORD, DB_NAME) - MySQL components
3. Local SQLite file (employees.db in the working directory)
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

DEFAULT_DATABASE_URL = "sqlite:///employees.db"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Console logging verbosity
        log_to_file: Whether to also write daily log files
        log_dir: Directory for log files (None = <project>/logs)
        database_url: SQLAlchemy connection string
        auto_create_tables: Create the employee table on startup
        enable_audit_logging: Log every request through AuditMiddleware
        api_host: Bind address for uvicorn
        api_port: Bind port for uvicorn
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool
    log_dir: Optional[Path]

    # Database settings
    database_url: str
    auto_create_tables: bool

    # Server settings
    enable_audit_logging: bool
    api_host: str
    api_port: int

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in {"1", "true", "yes"}


def _get_int(key: str, default: str) -> int:
    raw = _get_env(key, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be an integer, got {raw!r}")


def normalize_database_url(database_url: str) -> str:
    """
    Make a connection URL usable by SQLAlchemy.

    Hosted providers hand out ``postgres://`` and ``mysql://`` URLs;
    SQLAlchemy needs the dialect name and, for MySQL, the pymysql driver.
    """
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    if database_url.startswith("mysql://"):
        database_url = database_url.replace("mysql://", "mysql+pymysql://", 1)
    return database_url


def _resolve_database_url() -> str:
    database_url = os.environ.get("DATABASE_URL")

    if not database_url and os.environ.get("DB_HOST"):
        host = _get_env("DB_HOST")
        port = _get_env("DB_PORT", "3306")
        user = _get_env("DB_USER", "root")
        password = quote_plus(_get_env("DB_PASSWORD", ""))
        name = _get_env("DB_NAME", "employees")
        database_url = f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"

    return normalize_database_url(database_url or DEFAULT_DATABASE_URL)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; call ``get_settings.cache_clear()`` after
    changing the environment (tests do this).

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    log_dir = os.environ.get("LOG_DIR")

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "EmployeeLookupAPI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_to_file=_get_bool("LOG_TO_FILE", "true"),
        log_dir=Path(log_dir) if log_dir else None,

        # Database
        database_url=_resolve_database_url(),
        auto_create_tables=_get_bool("AUTO_CREATE_TABLES", "true"),

        # Server
        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
        api_host=_get_env("API_HOST", "0.0.0.0"),
        api_port=_get_int("API_PORT", "8000"),
    )
