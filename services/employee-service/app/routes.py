"""
Employee HTTP routes.

Every handler binds its inputs through the route's binding table in
``app.binding`` and reaches the collection only through the repository
handle injected by ``get_repository``.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from app import __version__
from app.binding import (AUTHORIZATION_BINDINGS, DELETE_BINDINGS,
                         GET_BY_HEADER_BINDINGS, GET_BY_ROUTE_BINDINGS,
                         bind_parameters)
from app.config import Settings
from app.dependencies import get_repository, get_settings
from app.exceptions import (EmployeeNotFoundException, MalformedBodyException,
                            UnauthorizedException)
from app.logging_config import get_logger
from app.models import Employee, HealthResponse, parse_employee_body
from app.repositories import IEmployeeRepository

logger = get_logger(__name__)

WELCOME_TEXT = "Welcome to the home page."
ADDED_TEXT = "Employee added successfully."
UPDATED_TEXT = "Employee updated successfully."
DELETED_TEXT = "Employee is deleted successfully."
NOT_FOUND_TEXT = "Employee not found."

router = APIRouter()

# Alternate GET keyed by the 'identity' header, mounted when enabled
header_lookup_router = APIRouter()


async def _read_body(request: Request) -> str:
    raw = await request.body()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedBodyException(str(e)) from e


@router.get("/", response_class=PlainTextResponse, tags=["Home"])
async def home() -> str:
    """Home endpoint."""
    return WELCOME_TEXT


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(
    repository: IEmployeeRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=__version__,
        employees=repository.count(),
    )


@router.get(
    "/employees/{id}",
    response_model=Employee,
    responses={
        200: {"description": "Employee found; name and position overwritten"},
        400: {"description": "Route id is not an integer"},
        404: {"description": "Employee not found"},
    },
    summary="Get employee by route id",
    tags=["Employees"],
)
async def get_employee(
    request: Request,
    repository: IEmployeeRepository = Depends(get_repository),
) -> Employee:
    """
    Look up an employee by the ``id`` path segment.

    The stored record's name and position are overwritten with the
    ``name`` query parameter and the ``Position`` header (empty when
    absent) before it is returned.
    """
    params = bind_parameters(request, GET_BY_ROUTE_BINDINGS)
    employee_id = params["id"]

    employee = repository.overwrite_identity(
        employee_id, params["name"], params["position"]
    )
    if employee is None:
        raise EmployeeNotFoundException(employee_id)

    logger.debug("Employee fetched by route id", employee_id=employee_id)
    return employee


@header_lookup_router.get(
    "/employees",
    response_model=Employee,
    responses={
        200: {"description": "Employee found"},
        400: {"description": "Missing or non-integer identity header"},
        404: {"description": "Employee not found"},
    },
    summary="Get employee by identity header",
    tags=["Employees"],
)
async def get_employee_by_header(
    request: Request,
    repository: IEmployeeRepository = Depends(get_repository),
) -> Employee:
    """Look up an employee by the ``identity`` request header."""
    params = bind_parameters(request, GET_BY_HEADER_BINDINGS)

    employee = repository.get_by_id(params["id"])
    if employee is None:
        raise EmployeeNotFoundException(params["id"])

    return employee


@router.post(
    "/employees",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Employee added"},
        400: {"description": "Malformed body, or missing/non-positive id"},
        409: {"description": "Duplicate id (when unique ids are enforced)"},
    },
    summary="Add employee",
    tags=["Employees"],
)
async def add_employee(
    request: Request,
    repository: IEmployeeRepository = Depends(get_repository),
) -> Response:
    """
    Add an employee from the JSON request body.

    A body that parses to ``null`` or carries an id that is not
    positive is rejected with 400 and an empty body.
    """
    employee = parse_employee_body(await _read_body(request))

    if employee is None or employee.id <= 0:
        logger.warning(
            "Rejected employee without positive id",
            employee_id=employee.id if employee else None,
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    repository.add(employee)

    return PlainTextResponse(ADDED_TEXT, status_code=status.HTTP_201_CREATED)


@router.put(
    "/employees",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Employee not found"},
        204: {"description": "Employee updated"},
        400: {"description": "Malformed body"},
    },
    summary="Update employee",
    tags=["Employees"],
)
async def update_employee(
    request: Request,
    repository: IEmployeeRepository = Depends(get_repository),
) -> Response:
    """
    Overwrite name, position and salary of the employee with the body's id.

    A miss is reported as 200 with a not-found message rather than 404.
    """
    employee = parse_employee_body(await _read_body(request))

    if repository.update(employee):
        # 204 carries no body
        logger.info(UPDATED_TEXT, employee_id=employee.id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return PlainTextResponse(NOT_FOUND_TEXT, status_code=status.HTTP_200_OK)


@router.delete(
    "/employees/{id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Employee deleted"},
        400: {"description": "Route id is not an integer"},
        401: {"description": "Authorization header missing or wrong"},
        404: {"description": "Employee not found"},
    },
    summary="Delete employee",
    tags=["Employees"],
)
async def delete_employee(
    request: Request,
    repository: IEmployeeRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Delete an employee by the ``id`` path segment.

    The ``Authorization`` header must equal the configured delete token.
    It is checked before the id is bound, so an unauthorized request
    gets 401 whatever the id.
    """
    auth = bind_parameters(request, AUTHORIZATION_BINDINGS)
    if auth["authorization"] != settings.DELETE_AUTH_TOKEN:
        raise UnauthorizedException()

    params = bind_parameters(request, DELETE_BINDINGS)
    if not repository.delete(params["id"]):
        raise EmployeeNotFoundException(params["id"])

    return PlainTextResponse(DELETED_TEXT, status_code=status.HTTP_200_OK)
