"""
Forgery: user account service.

Application package root. A small FastAPI service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Account creation, lookup and credential checks.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, request hooks.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
