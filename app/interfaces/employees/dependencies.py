"""
Dependency injection for the employees bounded context.

Provides FastAPI dependency functions that wire the upstream adapter
into the aggregator via constructor injection. The shared HTTP client
lives on ``app.state``; it is created by the application lifespan or
passed in by whoever builds the app.
"""

import httpx
from fastapi import Request

from app.application.employees.aggregator import EmployeeAggregator
from app.core.config import Settings
from app.infrastructure.employees.upstream_gateway import UpstreamEmployeeGateway


def build_upstream_client(settings: Settings) -> httpx.Client:
    """Build the HTTP client used to reach the upstream service."""
    return httpx.Client(
        base_url=settings.upstream_base_url,
        timeout=settings.upstream_timeout_seconds,
        headers={"Accept": "application/json"},
    )


def get_employee_aggregator(request: Request) -> EmployeeAggregator:
    """Build EmployeeAggregator with its infrastructure dependencies."""
    settings: Settings = request.app.state.settings
    client: httpx.Client = request.app.state.upstream_client
    return EmployeeAggregator(
        gateway=UpstreamEmployeeGateway(
            client=client,
            employees_path=settings.upstream_employees_path,
        ),
        top_earners_limit=settings.top_earners_limit,
    )
