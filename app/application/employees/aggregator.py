"""
Aggregator for the employees bounded context.

Input: employee IDs, name fragments, or a raw create field map.
Output: Employee entities, salary aggregates, or a delete confirmation.
Side effects: create and delete are forwarded to the upstream.
Failure cases: EmployeeNotFoundError, InvalidEmployeeInputError,
    UpstreamUnavailableError, EmptyCollectionError, DeleteFailedError.

Every read re-fetches the full collection; nothing is cached.
"""

import logging
from typing import Any, Mapping

from app.application.employees.dtos import CreateEmployeeCommand, DeleteEmployeeResult
from app.domain.employees import queries
from app.domain.employees.entities import DeleteOutcome, Employee
from app.domain.employees.errors import DeleteFailedError, EmployeeNotFoundError
from app.domain.employees.ports import EmployeeGateway

logger = logging.getLogger(__name__)


class EmployeeAggregator:
    """Orchestrates every employee operation exposed by the API.

    Fetches from the upstream through the gateway port, then filters,
    sorts or derives in memory using the domain queries.
    """

    def __init__(
        self,
        gateway: EmployeeGateway,
        top_earners_limit: int = queries.DEFAULT_TOP_EARNERS,
    ) -> None:
        """Initialize the aggregator.

        Args:
            gateway: Port to the upstream employee-record service.
            top_earners_limit: Default size of the top earners list.
        """
        self._gateway = gateway
        self._top_earners_limit = top_earners_limit

    def list_all(self) -> list[Employee]:
        """Return the upstream collection unmodified."""
        return self._gateway.fetch_all()

    def search(self, fragment: str) -> list[Employee]:
        """Return employees whose name contains the fragment, ignoring case."""
        logger.info("Searching employees by name fragment of length %d", len(fragment))
        return queries.filter_by_name(self.list_all(), fragment)

    def get_by_id(self, employee_id: str) -> Employee:
        """Return one employee by ID.

        Raises:
            EmployeeNotFoundError: If the upstream does not know the ID.
        """
        logger.info("Fetching employee with ID: %s", employee_id)
        return self._gateway.fetch_by_id(employee_id)

    def highest_salary(self) -> int:
        """Return the highest salary across all employees.

        Raises:
            EmptyCollectionError: If the upstream has no employees.
        """
        return queries.highest_salary(self.list_all())

    def top_earners(self, n: int | None = None) -> list[str]:
        """Return the names of the ``n`` best-paid employees."""
        limit = self._top_earners_limit if n is None else n
        return queries.top_earner_names(self.list_all(), limit)

    def create(self, input_fields: Mapping[str, Any]) -> Employee:
        """Validate a raw field map and forward it to the upstream.

        Raises:
            InvalidEmployeeInputError: Before any network call, if a
                required field is missing or invalid.
        """
        command = CreateEmployeeCommand.from_fields(input_fields)
        employee = self._gateway.create(command.to_upstream_payload())
        logger.info("Created employee with ID: %s", employee.id)
        return employee

    def delete_by_id(self, employee_id: str) -> DeleteEmployeeResult:
        """Delete an employee by ID.

        The upstream deletes by name, so the ID is resolved first.

        Raises:
            EmployeeNotFoundError: If the ID cannot be resolved to a name.
            DeleteFailedError: If the upstream does not confirm the delete.
        """
        logger.info("Deleting employee with ID: %s", employee_id)
        employee = self.get_by_id(employee_id)
        if not employee.name:
            raise EmployeeNotFoundError(employee_id)

        outcome = self._gateway.delete_by_name(employee.name)
        _ensure_deleted(outcome)

        logger.info("Deleted employee with ID: %s", employee_id)
        return DeleteEmployeeResult(employee_id=employee_id, name=employee.name)


def _ensure_deleted(outcome: DeleteOutcome) -> None:
    """Raise DeleteFailedError unless the outcome confirms the delete.

    Precedence: confirmed flag on 2xx, then status text, then status code.
    """
    if outcome.is_success_status and outcome.deleted is True:
        return
    if outcome.status_text is not None:
        raise DeleteFailedError(outcome.status_text)
    if not outcome.is_success_status:
        raise DeleteFailedError(f"Status Code: {outcome.status_code}")
    raise DeleteFailedError("unexpected response from employee service")
