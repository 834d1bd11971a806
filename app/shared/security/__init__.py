"""
Security package: response headers and request rate limiting.
"""
