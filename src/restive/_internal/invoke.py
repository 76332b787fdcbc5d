"""Invoke helpers — call sync or async resource handlers uniformly.

Resource methods can be ``def`` or ``async def``. Coroutine handlers
are awaited on the event loop; plain functions run in a worker thread
so a blocking store does not stall other requests.

Usage::

    from restive._internal.invoke import invoke

    status, data = await invoke(route.handler, params)
"""

import functools
import inspect
from typing import Any

from anyio import to_thread


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler* and return its result, awaiting it if needed."""
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)
    result = await to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
