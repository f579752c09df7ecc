"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Exception hierarchy mapped to HTTP status codes
- audit.py          : Request audit and security header middleware
"""
from employee_api.core.config import get_settings, Settings
from employee_api.core.logging_config import setup_logging, get_logger, LoggerMixin
from employee_api.core.exceptions import (
    EmployeeAPIException,
    EmployeeNotFoundError,
    DatabaseError,
)

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "EmployeeAPIException",
    "EmployeeNotFoundError",
    "DatabaseError",
]
