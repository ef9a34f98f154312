"""
Rate limiting setup.

Uses slowapi to enforce a default per-client limit on every route.
Each application gets its own Limiter with in-memory counters, so
separate app instances (e.g. in tests) never share budgets.

Limits are checked by an application-wide dependency rather than by
SlowAPIMiddleware. The middleware finds the endpoint by walking the
app's routes, which fails for routes FastAPI stores behind included
routers, so it would let every request through.
"""

from fastapi import FastAPI, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        default_limit: Limit string applied to every route, e.g. "60/minute".
        enabled: When False the limiter lets every request through.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


def install_rate_limiting(app: FastAPI, limiter: Limiter) -> None:
    """Attach the limiter to the app.

    Limits are enforced by enforce_rate_limit, which create_app adds
    as a dependency of every route. The RateLimitExceeded handler is
    registered with the other error handlers.
    """
    app.state.limiter = limiter


def enforce_rate_limit(request: Request) -> None:
    """Count the request against the default limits of its route.

    Raises:
        RateLimitExceeded: The client has used up its budget.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)
