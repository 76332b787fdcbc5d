"""Restive API class.

Mutable during setup (resource registration). Frozen at runtime when
``api.run()`` or ``__call__()`` is first invoked.
"""

import logging
import threading

from restive._internal.asgi import Receive, Scope, Send
from restive.config import APIConfig
from restive.errors import ConfigurationError
from restive.routing.endpoint import Endpoint, build_endpoint, normalize_root
from restive.routing.mount import Mount, MountTable
from restive.routing.pattern import compile_path
from restive.server.handler import handle_request

logger = logging.getLogger("restive.api")


class API:
    """A group of resources served under their root paths.

    Each resource is turned into an endpoint from the verbs it
    implements; requests are routed to the matching method and the
    returned data is marshalled to JSON.

    Usage::

        api = API()
        api.add_resource(Books(), "/books")
        api.run(port=3000)

    Several APIs can run on separate ports; each manages its own
    resources.

    Thread safety:
        Registration is single-threaded and happens before serving.
        The freeze transition uses a Lock + double-check so exactly one
        thread builds the mount table, even when several server workers
        receive their first request at the same time.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_mounts",
        "_pending",
        "config",
    )

    def __init__(self, config: APIConfig | None = None) -> None:
        self.config: APIConfig = config or APIConfig()
        self._pending: list[Mount] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Set by _freeze()
        self._mounts: MountTable | None = None

    # -- Resource registration --

    def add_resource(self, resource: object, path: str) -> Endpoint:
        """Mount *resource* at *path*.

        Routes are built immediately from the capabilities the resource
        declares, so a bad path or a resource without any verb fails
        here rather than at the first request.

        Raises:
            CompileError: If *path* is not a valid path template.
            ConfigurationError: If the resource implements no verb, or
                *path* is already mounted.
        """
        self._check_not_frozen()
        if not path.startswith("/"):
            msg = f"Resource path must start with '/': {path!r}"
            raise ConfigurationError(msg)
        if compile_path(path).param_names:
            msg = f"Resource path must be literal, got placeholders in {path!r}"
            raise ConfigurationError(msg)
        path = normalize_root(path)
        if any(m.root == path for m in self._pending):
            msg = f"A resource is already mounted at {path!r}"
            raise ConfigurationError(msg)

        endpoint = build_endpoint(resource, path)
        self._pending.append(Mount(root=path, endpoint=endpoint, resource=resource))
        logger.debug(
            "Mounted %s at %s (%s)",
            type(resource).__name__,
            path,
            ", ".join(sorted(endpoint.methods)),
        )
        return endpoint

    @property
    def endpoints(self) -> tuple[Endpoint, ...]:
        """Endpoints in registration order."""
        return tuple(m.endpoint for m in self._pending)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the API and serve it until interrupted.

        Args:
            host: Override bind host.
            port: Override bind port.

        Raises:
            ConfigurationError: If no resource has been added.
        """
        self._ensure_frozen()

        from restive.server.serve import run_server

        _host = host if host is not None else self.config.host
        _port = port if port is not None else self.config.port
        logger.info("Running server on %s:%d", _host, _port)
        run_server(self, _host, _port, log_level=self.config.log_level)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._mounts is not None

        await handle_request(scope, receive, send, mounts=self._mounts, config=self.config)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze at server startup so setup errors surface before serving."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except ConfigurationError as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build the read-only mount table.

        MUST only be called while holding _freeze_lock.
        """
        if not self._pending:
            msg = "You must add at least one resource to this API."
            raise ConfigurationError(msg)
        self._mounts = MountTable(self._pending)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the API after it has started serving requests. "
                "Add resources before calling api.run()."
            )
            raise RuntimeError(msg)
