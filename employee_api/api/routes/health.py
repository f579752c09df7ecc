"""
Health Check Routes - System health and monitoring endpoints.

These endpoints are used for:
1. Load balancer health checks
2. Kubernetes liveness/readiness probes
3. Monitoring systems
"""
from datetime import datetime

from fastapi import APIRouter, Request, Response

from employee_api import __version__
from employee_api.core.logging_config import get_logger
from employee_api.models.employee import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns 200 OK whenever the API process is responsive."
)
async def health_check() -> HealthResponse:
    """
    Perform a basic health check.

    Does not touch the database; see ``/health/ready`` for that.
    """
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.utcnow()
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
    description="""
    Returns whether the service is ready to accept requests.

    Runs `SELECT 1` against the employee store. Responds 503 with
    status `unavailable` when the store cannot be reached.
    """,
    responses={503: {"model": HealthResponse, "description": "Employee store unavailable"}}
)
def readiness_check(request: Request, response: Response) -> HealthResponse:
    """Perform a readiness check against the database wired into the app."""
    logger.debug("Readiness check requested")

    db = request.app.state.database
    if db is not None and not db.check_connection():
        logger.warning("Readiness check failed: database unreachable")
        response.status_code = 503
        return HealthResponse(status="unavailable", version=__version__)

    return HealthResponse(
        status="ready",
        version=__version__,
        timestamp=datetime.utcnow()
    )
