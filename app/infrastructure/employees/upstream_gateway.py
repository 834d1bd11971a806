"""
Adapter: Upstream employee-record service over HTTP.

Implements EmployeeGateway.
Uses an injected httpx.Client, decodes the ``{data, status}`` envelope and
the snake-case employee document, and translates transport failures and
HTTP status codes into domain errors.
"""

import logging
from typing import Any, Generic, Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.employees.entities import DeleteOutcome, Employee
from app.domain.employees.errors import (
    EmployeeNotFoundError,
    InvalidEmployeeInputError,
    UnexpectedUpstreamResponseError,
    UpstreamUnavailableError,
)
from app.domain.employees.ports import EmployeeGateway

logger = logging.getLogger(__name__)

DEFAULT_EMPLOYEES_PATH = "/api/v1/employee"

HTTP_400 = 400
HTTP_404 = 404
HTTP_429 = 429
HTTP_500 = 500

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamEmployeeDocument(BaseModel):
    """Employee document as serialized by the upstream."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str = Field(alias="employee_name")
    salary: int = Field(alias="employee_salary")
    age: int = Field(alias="employee_age")
    title: str = Field(alias="employee_title")
    email: Optional[str] = Field(default=None, alias="employee_email")

    def to_entity(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            salary=self.salary,
            age=self.age,
            title=self.title,
            email=self.email,
        )


class UpstreamLookupDocument(UpstreamEmployeeDocument):
    """Single-record document; the upstream may return it without a name."""

    name: Optional[str] = Field(default=None, alias="employee_name")


class UpstreamEnvelope(BaseModel, Generic[T]):
    """Response wrapper used by every upstream endpoint."""

    data: Optional[T] = None
    status: Optional[str] = None


class UpstreamEmployeeGateway(EmployeeGateway):
    """Concrete adapter for the upstream employee REST API.

    The HTTP client is owned by the caller; this adapter never closes it.
    """

    def __init__(
        self, client: httpx.Client, employees_path: str = DEFAULT_EMPLOYEES_PATH
    ) -> None:
        """Initialize the adapter.

        Args:
            client: HTTP client whose base URL points at the upstream host.
            employees_path: Path of the employee collection on that host.
        """
        self._client = client
        # Relative to the client's base URL, without a trailing slash
        self._path = employees_path.strip("/")

    def fetch_all(self) -> list[Employee]:
        """Return the full employee collection in upstream order."""
        operation = "fetch all employees"
        response = self._send(operation, "GET", self._path)
        self._raise_for_status(operation, response)
        envelope = self._decode(
            operation, response, UpstreamEnvelope[list[UpstreamEmployeeDocument]]
        )
        return [doc.to_entity() for doc in envelope.data or []]

    def fetch_by_id(self, employee_id: str) -> Employee:
        """Return a single employee, or raise EmployeeNotFoundError."""
        operation = "fetch employee"
        url = f"{self._path}/{quote(employee_id, safe='')}"
        response = self._send(operation, "GET", url)
        if response.status_code == HTTP_404:
            logger.warning("Employee not found upstream with ID: %s", employee_id)
            raise EmployeeNotFoundError(employee_id)
        self._raise_for_status(operation, response)
        envelope = self._decode(
            operation, response, UpstreamEnvelope[UpstreamLookupDocument]
        )
        if envelope.data is None:
            raise EmployeeNotFoundError(employee_id)
        if envelope.data.name is None:
            logger.warning("Employee with ID %s has no name upstream", employee_id)
            raise EmployeeNotFoundError(employee_id)
        return envelope.data.to_entity()

    def create(self, payload: dict[str, Any]) -> Employee:
        """Forward a create payload and return the stored record."""
        operation = "create employee"
        response = self._send(operation, "POST", self._path, json=payload)
        if response.status_code == HTTP_400:
            logger.warning("Upstream rejected employee input")
            reason = _status_text(response) or "rejected by employee service"
            raise InvalidEmployeeInputError([reason])
        self._raise_for_status(operation, response)
        envelope = self._decode(
            operation, response, UpstreamEnvelope[UpstreamEmployeeDocument]
        )
        if envelope.data is None:
            raise UnexpectedUpstreamResponseError(operation, "response has no data")
        return envelope.data.to_entity()

    def delete_by_name(self, name: str) -> DeleteOutcome:
        """Delete by name and report the raw outcome for any HTTP status."""
        response = self._send(
            "delete employee", "DELETE", self._path, json={"name": name}
        )
        deleted: Optional[bool] = None
        status_text: Optional[str] = None
        try:
            envelope = UpstreamEnvelope[bool].model_validate_json(response.content)
        except ValidationError:
            logger.warning(
                "Undecodable delete response from upstream (HTTP %d)",
                response.status_code,
            )
        else:
            deleted = envelope.data
            status_text = envelope.status
        return DeleteOutcome(
            status_code=response.status_code,
            deleted=deleted,
            status_text=status_text,
        )

    def _send(
        self, operation: str, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        try:
            return self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error(
                "Error communicating with employee service to %s: %s",
                operation,
                type(exc).__name__,
            )
            raise UpstreamUnavailableError(operation, type(exc).__name__) from exc

    def _raise_for_status(self, operation: str, response: httpx.Response) -> None:
        code = response.status_code
        if code >= HTTP_500 or code == HTTP_429:
            logger.error("Employee service returned HTTP %d to %s", code, operation)
            raise UpstreamUnavailableError(operation, f"HTTP {code}")
        if not response.is_success:
            logger.error("Employee service returned HTTP %d to %s", code, operation)
            raise UnexpectedUpstreamResponseError(operation, f"HTTP {code}")

    def _decode(
        self, operation: str, response: httpx.Response, model: type[ModelT]
    ) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error(
                "Could not decode employee service response to %s (%d errors)",
                operation,
                exc.error_count(),
            )
            raise UnexpectedUpstreamResponseError(
                operation, "malformed response body"
            ) from exc


def _status_text(response: httpx.Response) -> Optional[str]:
    """Return the envelope status text of a response, if it has one."""
    try:
        return UpstreamEnvelope[Any].model_validate_json(response.content).status
    except ValidationError:
        return None
