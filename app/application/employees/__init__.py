"""
Application layer for the employees bounded context.

The aggregator coordinates domain queries and the gateway port to
fulfil each API operation. No framework or infrastructure imports allowed.
"""
