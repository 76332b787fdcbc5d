"""Binding of decoded JSON bodies to resource model dataclasses.

A ``Restful`` resource names a dataclass through ``get_resource()``;
POST and PUT bodies are bound into an instance of it before the
handler runs.

Rules:

- Each dataclass field is looked up by name in the JSON object.
- ``str``, ``int``, ``float`` and ``bool`` fields are converted; a
  value that does not convert is passed through unchanged.
- Missing keys use the field default. Unknown keys are ignored.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, TypeVar

from restive.errors import BadRequest

T = TypeVar("T")

_BUILTINS: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
}


def is_extractable_dataclass(annotation: Any) -> bool:
    """Return True if *annotation* is a user-defined dataclass type.

    Restive's own dataclasses (``Request``, ``Response``, ...) are never
    treated as body models.
    """
    if not isinstance(annotation, type) or not dataclasses.is_dataclass(annotation):
        return False
    module = getattr(annotation, "__module__", "") or ""
    return not module.startswith("restive.")


def extract_dataclass(cls: type[T], data: Mapping[str, Any]) -> T:
    """Create a *cls* instance from a decoded JSON object.

    Raises:
        BadRequest: If a required field (one without a default) is
            missing from *data*.
    """
    kwargs: dict[str, Any] = {}

    for f in dataclasses.fields(cls):  # type: ignore[arg-type]
        if not f.init or f.name not in data:
            continue
        target_type = f.type
        if isinstance(target_type, str):
            target_type = _BUILTINS.get(target_type, target_type)
        kwargs[f.name] = _convert(data[f.name], target_type)

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise BadRequest(f"Invalid {cls.__name__} body: {exc}") from exc


def _convert(value: Any, target_type: Any) -> Any:
    """Convert *value* to *target_type*, returning *value* unchanged on failure."""
    if target_type is str:
        return value if isinstance(value, str) else str(value)

    if target_type in (int, float):
        if isinstance(value, bool):
            return value
        try:
            return target_type(value)
        except (ValueError, TypeError):
            return value

    if target_type is bool:
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return bool(value)

    return value
