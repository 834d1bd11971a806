"""
FastAPI router for the employees bounded context.

All routes delegate to the aggregator. No business logic here.
Error mapping is handled by centralized error handlers.
Fixed paths are declared before ``/{employee_id}`` so they are not
captured as IDs.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import PlainTextResponse

from app.application.employees.aggregator import EmployeeAggregator
from app.interfaces.employees.dependencies import get_employee_aggregator
from app.interfaces.employees.schemas import EmployeeItem, ErrorResponse

router = APIRouter(prefix="/employees", tags=["employees"])

UPSTREAM_ERRORS = {
    503: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=list[EmployeeItem],
    responses=UPSTREAM_ERRORS,
    summary="List employees",
    description="Return every employee known to the upstream service.",
)
def list_employees(
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> list[EmployeeItem]:
    """List all employees."""
    return [EmployeeItem.from_entity(e) for e in aggregator.list_all()]


@router.get(
    "/search",
    response_model=list[EmployeeItem],
    responses=UPSTREAM_ERRORS,
    summary="Search employees by name",
    description="Case-insensitive substring match on the employee name.",
)
def search_employees(
    search_string: str = Query(..., alias="searchString"),
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> list[EmployeeItem]:
    """Search employees whose name contains the given fragment."""
    return [EmployeeItem.from_entity(e) for e in aggregator.search(search_string)]


@router.get(
    "/highestSalary",
    response_model=int,
    responses=UPSTREAM_ERRORS,
    summary="Highest salary",
    description="Return the highest salary across all employees.",
)
def get_highest_salary(
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> int:
    """Return the highest salary."""
    return aggregator.highest_salary()


@router.get(
    "/topTenHighestEarningEmployeeNames",
    response_model=list[str],
    responses=UPSTREAM_ERRORS,
    summary="Top earners",
    description="Names of the best-paid employees, highest salary first.",
)
def get_top_earner_names(
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> list[str]:
    """Return the names of the top earners."""
    return aggregator.top_earners()


@router.get(
    "/{employee_id}",
    response_model=EmployeeItem,
    responses={404: {"model": ErrorResponse}, **UPSTREAM_ERRORS},
    summary="Get employee",
    description="Return a single employee by ID.",
)
def get_employee(
    employee_id: str,
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> EmployeeItem:
    """Fetch one employee."""
    return EmployeeItem.from_entity(aggregator.get_by_id(employee_id))


@router.post(
    "",
    response_model=EmployeeItem,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, **UPSTREAM_ERRORS},
    summary="Create employee",
    description="Validate the field map and forward it to the upstream service.",
)
def create_employee(
    input_fields: dict[str, Any] = Body(...),
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> EmployeeItem:
    """Create an employee from a loosely typed field map."""
    return EmployeeItem.from_entity(aggregator.create(input_fields))


@router.delete(
    "/{employee_id}",
    response_class=PlainTextResponse,
    responses={404: {"model": ErrorResponse}, **UPSTREAM_ERRORS},
    summary="Delete employee",
    description="Resolve the ID to a name, then delete by name upstream.",
)
def delete_employee(
    employee_id: str,
    aggregator: EmployeeAggregator = Depends(get_employee_aggregator),
) -> str:
    """Delete one employee and return a confirmation message."""
    return aggregator.delete_by_id(employee_id).message
