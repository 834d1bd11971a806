"""
Domain entities for the employees bounded context.

Entities are transient: they are built from an upstream response,
used for one computation, and discarded. No framework imports and no IO.
"""

from dataclasses import dataclass
from typing import Optional

MIN_AGE = 16
MAX_AGE = 75


@dataclass(frozen=True)
class Employee:
    """A single employee record as held by the upstream service."""

    id: str
    name: str
    salary: int
    age: int
    title: str
    email: Optional[str] = None


@dataclass(frozen=True)
class DeleteOutcome:
    """Raw result of an upstream delete-by-name call.

    Attributes:
        status_code: HTTP status code returned by the upstream.
        deleted: Success flag from the envelope ``data`` field, None if absent.
        status_text: Envelope ``status`` field, None if absent.
    """

    status_code: int
    deleted: Optional[bool] = None
    status_text: Optional[str] = None

    @property
    def is_success_status(self) -> bool:
        """Return True for a 2xx status code."""
        return 200 <= self.status_code < 300
