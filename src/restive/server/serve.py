"""Server launcher.

Starts a uvicorn ASGI server with the live restive API object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restive.api import API


def run_server(
    api: API,
    host: str,
    port: int,
    *,
    log_level: str = "info",
) -> None:
    """Serve *api* with uvicorn until interrupted.

    uvicorn's ``run()`` also accepts an import string, but here we
    already hold the ``API`` instance, so ``uvicorn.Server`` is driven
    directly with the ASGI callable.

    Args:
        api: ASGI callable (restive API instance).
        host: Bind host address.
        port: Bind port number.
        log_level: uvicorn log level name.
    """
    import uvicorn

    config = uvicorn.Config(app=api, host=host, port=port, log_level=log_level)
    server = uvicorn.Server(config)
    server.run()
