"""API import resolution — resolves ``"module:attribute"`` strings to API instances.

Shared by ``restive run`` and ``restive routes``.
"""

import importlib

from restive.api import API


def resolve_api(import_string: str) -> API:
    """Resolve an import string to a restive API instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"api"`` (``"myapp"`` resolves to ``myapp.api``).
    A callable that is not an API is treated as a factory and called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an API.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "api"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, API):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, API):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a restive.API instance"
        raise TypeError(msg)

    return obj
