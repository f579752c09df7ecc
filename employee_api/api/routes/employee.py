"""
Employee Routes - Lookup of a single employee by name.

Endpoint:
- GET /api/employee?id=<name>

The query parameter is called ``id`` for compatibility with existing
clients, but it carries the employee's *name*, not the numeric identifier.
"""
from fastapi import APIRouter, Depends, Query, Request

from employee_api.core.exceptions import EmployeeNotFoundError
from employee_api.core.logging_config import get_logger
from employee_api.models.employee import EmployeeResponse, ErrorResponse
from employee_api.services.employee_service import EmployeeService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Employee"],
    responses={
        503: {"model": ErrorResponse, "description": "Employee store unavailable"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    }
)


def get_employee_service(request: Request) -> EmployeeService:
    """Return the service wired into the application by ``create_app``."""
    return request.app.state.employee_service


def get_employee(
    name: str = Query(
        ...,
        alias="id",
        description="Exact name of the employee to look up",
        examples=["PrithvirajV"],
    ),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """
    Look up an employee by exact name.

    Runs in the server's thread pool; the database call blocks only
    this request.
    """
    record = service.get_by_name(name)

    if record is None:
        logger.info(f"No employee named {name!r}")
        raise EmployeeNotFoundError(name)

    return EmployeeResponse.from_record(record)


router.add_api_route(
    "/employee",
    get_employee,
    methods=["GET"],
    response_model=EmployeeResponse,
    summary="Get employee by name",
    description="""
    Return the employee whose name equals the `id` query parameter.

    - **200**: `{"id": <int>, "name": "<string>"}`
    - **404**: no employee has that name (including an empty `id`)
    - **422**: the `id` parameter is missing
    - **503**: the employee store could not be queried
    """,
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
