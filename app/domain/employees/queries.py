"""
Domain queries over an employee collection.

Pure functions for name search and salary aggregates.
No framework imports. No IO. No side effects.
"""

from app.domain.employees.entities import Employee
from app.domain.employees.errors import EmptyCollectionError

DEFAULT_TOP_EARNERS = 10


def filter_by_name(employees: list[Employee], fragment: str) -> list[Employee]:
    """Return employees whose name contains ``fragment``, ignoring case.

    An empty fragment matches every employee. Input order is preserved.
    """
    needle = fragment.lower()
    return [e for e in employees if needle in e.name.lower()]


def highest_salary(employees: list[Employee]) -> int:
    """Return the maximum salary in the collection.

    Raises:
        EmptyCollectionError: If the collection is empty.
    """
    if not employees:
        raise EmptyCollectionError("highest salary")
    return max(e.salary for e in employees)


def top_earner_names(
    employees: list[Employee], limit: int = DEFAULT_TOP_EARNERS
) -> list[str]:
    """Return the names of the ``limit`` best-paid employees.

    Sorted by salary descending; ties keep their original order.
    """
    if limit <= 0:
        return []
    ranked = sorted(employees, key=lambda e: e.salary, reverse=True)
    return [e.name for e in ranked[:limit]]
