"""
Data Transfer Objects for the employees application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses; the create command also validates
the loosely typed field map it is built from.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from app.domain.employees.entities import MAX_AGE, MIN_AGE
from app.domain.employees.errors import InvalidEmployeeInputError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _require_text(fields: Mapping[str, Any], key: str, problems: list[str]) -> str:
    value = fields.get(key)
    if value is None:
        problems.append(f"'{key}' is required")
        return ""
    if not isinstance(value, str) or not value.strip():
        problems.append(f"'{key}' must be a non-empty string")
        return ""
    return value


def _require_int(
    fields: Mapping[str, Any], key: str, problems: list[str]
) -> Optional[int]:
    value = fields.get(key)
    if value is None:
        problems.append(f"'{key}' is required")
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        problems.append(f"'{key}' must be an integer")
        return None
    return value


@dataclass(frozen=True)
class CreateEmployeeCommand:
    """Input DTO for creating an employee.

    Attributes:
        name: Employee full name (non-empty).
        salary: Yearly salary, strictly positive.
        age: Age in years, between 16 and 75.
        title: Job title (non-empty).
        email: Optional e-mail address.
    """

    name: str
    salary: int
    age: int
    title: str
    email: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "CreateEmployeeCommand":
        """Build a command from a loosely typed field map.

        Every problem is collected before failing so the caller sees
        all of them at once.

        Args:
            fields: Raw field map, usually a decoded JSON object.

        Returns:
            A validated command.

        Raises:
            InvalidEmployeeInputError: If any field is missing or invalid.
        """
        problems: list[str] = []

        name = _require_text(fields, "name", problems)
        title = _require_text(fields, "title", problems)
        salary = _require_int(fields, "salary", problems)
        age = _require_int(fields, "age", problems)

        if salary is not None and salary < 1:
            problems.append("'salary' must be greater than zero")
        if age is not None and not (MIN_AGE <= age <= MAX_AGE):
            problems.append(f"'age' must be between {MIN_AGE} and {MAX_AGE}")

        email = fields.get("email")
        if email is not None:
            if not isinstance(email, str) or not EMAIL_PATTERN.match(email):
                problems.append("'email' must be a valid e-mail address")
                email = None

        if problems:
            raise InvalidEmployeeInputError(problems)

        return cls(name=name, salary=salary, age=age, title=title, email=email)

    def to_upstream_payload(self) -> dict[str, Any]:
        """Return the body expected by the upstream create endpoint."""
        payload: dict[str, Any] = {
            "name": self.name,
            "salary": self.salary,
            "age": self.age,
            "title": self.title,
        }
        if self.email is not None:
            payload["email"] = self.email
        return payload


@dataclass(frozen=True)
class DeleteEmployeeResult:
    """Output DTO for a confirmed delete.

    Attributes:
        employee_id: ID that was requested for deletion.
        name: Name the upstream deleted by.
    """

    employee_id: str
    name: str

    @property
    def message(self) -> str:
        """Human-readable confirmation returned to the API caller."""
        return (
            f"Employee with ID {self.employee_id} (name: {self.name}) "
            "deleted successfully."
        )
