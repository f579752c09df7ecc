"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Wiring the database, repository and service together
2. Router registration
3. Middleware configuration
4. Exception handlers
5. Startup/shutdown events

Run with: uvicorn employee_api.api.main:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from employee_api import __version__
from employee_api.core.config import get_settings
from employee_api.core.logging_config import setup_logging, get_logger
from employee_api.core.exceptions import EmployeeAPIException
from employee_api.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from employee_api.api.routes import employee_router, health_router
from employee_api.database.connection import DatabaseConnection
from employee_api.database.init_db import init_employee_tables
from employee_api.database.repository import SQLAlchemyEmployeeRepository
from employee_api.models.employee import ErrorResponse
from employee_api.services.employee_service import EmployeeService

logger = get_logger(__name__)


def create_app(
    employee_service: Optional[EmployeeService] = None,
    database: Optional[DatabaseConnection] = None,
) -> FastAPI:
    """
    Build the application and wire its collaborators.

    With no arguments the app owns its database: it connects to
    ``settings.database_url``, creates the employee table on startup (when
    ``AUTO_CREATE_TABLES`` is on) and disposes the engine on shutdown.
    Passing a service (and optionally the database behind it) lets callers
    supply their own wiring; the app then leaves the database lifecycle to
    them.

    Args:
        employee_service: Service used by the employee endpoint
        database: Connection checked by the readiness endpoint

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir, settings.log_to_file)

    owns_database = employee_service is None and database is None
    if owns_database:
        database = DatabaseConnection(settings.database_url)
    if employee_service is None:
        employee_service = EmployeeService(SQLAlchemyEmployeeRepository(database))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")

        if owns_database and settings.auto_create_tables:
            init_employee_tables(database)

        yield  # Application runs here

        logger.info(f"Shutting down {settings.app_name}")
        if owns_database:
            database.close()

    app = FastAPI(
        title="Employee Lookup API",
        description="Look up employee records by name.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.database = database
    app.state.employee_service = employee_service

    # ============================================================
    # Middleware Configuration (Order matters!)
    # ============================================================

    app.add_middleware(SecurityHeadersMiddleware)

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)
        logger.info("Audit logging middleware enabled")

    if settings.is_development():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET"],
            allow_headers=["*"],
        )
        logger.warning("CORS configured for development (all origins allowed)")

    # ============================================================
    # Exception Handlers
    # ============================================================

    @app.exception_handler(EmployeeAPIException)
    async def employee_api_exception_handler(request: Request, exc: EmployeeAPIException):
        """Render application errors with their own status code."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(**exc.to_dict()).model_dump(mode="json")
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle uncaught exceptions globally.

        Detailed error information is only included in development mode.
        """
        logger.exception(f"Unhandled exception: {exc}")

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_error",
                message="An unexpected error occurred",
                details=str(exc) if settings.is_development() else None,
                timestamp=datetime.utcnow(),
            ).model_dump(mode="json")
        )

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(health_router)
    app.include_router(employee_router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "message": settings.app_name,
            "version": __version__,
            "documentation": "/docs",
            "health": "/health"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "employee_api.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development()
    )
