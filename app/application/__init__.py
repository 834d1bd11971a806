"""
Application layer package.

Contains the orchestration that sits between the API and the domain.
This layer depends on domain ports, never on infrastructure.
"""
