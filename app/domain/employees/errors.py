"""
Domain-specific errors for the employees bounded context.

All errors raised from the domain and application layers must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class EmployeeDomainError(Exception):
    """Base error for all employees domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EmployeeNotFoundError(EmployeeDomainError):
    """Raised when the upstream has no employee with the requested ID."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee with ID '{employee_id}' not found")
        self.employee_id = employee_id


class InvalidEmployeeInputError(EmployeeDomainError):
    """Raised when create input is missing or has ill-typed fields."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("Invalid employee input: " + "; ".join(problems))
        self.problems = problems


class UpstreamUnavailableError(EmployeeDomainError):
    """Raised when the upstream cannot be reached or reports a server error."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Employee service unavailable while trying to {operation}: {reason}"
        )
        self.operation = operation
        self.reason = reason


class EmptyCollectionError(EmployeeDomainError):
    """Raised when an aggregate is requested over an empty collection."""

    def __init__(self, aggregate: str) -> None:
        super().__init__(f"No employees found to determine {aggregate}")
        self.aggregate = aggregate


class DeleteFailedError(EmployeeDomainError):
    """Raised when the upstream does not confirm a delete."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to delete employee: {reason}")
        self.reason = reason


class UnexpectedUpstreamResponseError(EmployeeDomainError):
    """Raised when the upstream answers with a status or body we cannot use."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Unexpected response from employee service while trying to "
            f"{operation}: {reason}"
        )
        self.operation = operation
        self.reason = reason
