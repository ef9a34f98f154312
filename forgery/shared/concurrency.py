"""
Running blocking use cases from async routes.

Use cases and stores are synchronous. Routes hand them to a worker
thread that is abandoned when the request is cancelled, so the request
timeout can answer at its deadline instead of waiting for the thread.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from anyio import to_thread

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any) -> T:
    """Run func(*args) in a worker thread.

    If the awaiting task is cancelled, the call returns at once and
    the thread is left to finish in the background. Its result is
    discarded, but any side effect it has already started still lands.
    """
    return await to_thread.run_sync(functools.partial(func, *args), abandon_on_cancel=True)
