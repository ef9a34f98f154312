"""
Infrastructure adapters for the users bounded context.

Each adapter implements a domain port (ABC). The in-memory store
can be replaced by a database-backed one without touching use cases.
"""
