"""
Employee API: REST facade over a remote employee-record service.

Application package root. A small service using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - employees: Listing, search, salary aggregates, create and delete.

Layers:
    - domain: Entities, pure queries, ports (ABCs), errors.
    - application: The aggregator and its DTOs.
    - infrastructure: The upstream HTTP adapter implementing the gateway port.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
