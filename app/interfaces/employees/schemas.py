"""
Pydantic schemas for employees API responses.

These schemas define the API contract. Employee documents keep the
upstream's snake-case keys so clients see one shape end to end.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.employees.entities import Employee


class EmployeeItem(BaseModel):
    """A single employee document in a response."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = Field(alias="employee_name")
    salary: int = Field(alias="employee_salary")
    age: int = Field(alias="employee_age")
    title: str = Field(alias="employee_title")
    email: Optional[str] = Field(default=None, alias="employee_email")

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeItem":
        return cls(
            id=employee.id,
            name=employee.name,
            salary=employee.salary,
            age=employee.age,
            title=employee.title,
            email=employee.email,
        )


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
