"""
Users bounded context, domain layer.

Entities, errors and ports for user accounts and credentials.
"""
