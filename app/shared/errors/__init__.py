"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that employees domain errors
are consistently translated into API responses.
"""
