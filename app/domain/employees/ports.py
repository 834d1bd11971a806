"""
Port interfaces (ABCs) for the employees bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.employees.entities import DeleteOutcome, Employee


class EmployeeGateway(ABC):
    """Port for the remote employee-record service."""

    @abstractmethod
    def fetch_all(self) -> list[Employee]:
        """Return the full employee collection in upstream order.

        Raises:
            UpstreamUnavailableError: On transport failure or upstream 5xx.
        """
        raise NotImplementedError

    @abstractmethod
    def fetch_by_id(self, employee_id: str) -> Employee:
        """Return a single employee.

        Raises:
            EmployeeNotFoundError: If the upstream does not know the ID.
            UpstreamUnavailableError: On transport failure or upstream 5xx.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, payload: dict[str, Any]) -> Employee:
        """Forward a validated create payload and return the stored record."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_name(self, name: str) -> DeleteOutcome:
        """Ask the upstream to delete the employee with the given name.

        The outcome is returned for any HTTP response; only transport
        failures raise.
        """
        raise NotImplementedError
