"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error catalog, envelope rendering and handler registration
- Security middleware (headers, rate limiting, request timeout)
- Logging configuration
"""
