"""
Employees bounded context, domain layer.

This module contains all domain logic for the employees context:
- Employee entity and delete outcome
- Gateway port to the upstream employee-record service
- Pure salary/name queries over an employee collection
"""
