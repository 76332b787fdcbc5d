"""Immutable multi-valued request parameters.

Implements ``Mapping[str, str]`` over a name -> values store.
The same type carries the query string, a URL-encoded form body, and
the merged set handed to resource handlers.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class Params(Mapping[str, str]):
    """Immutable request parameters.

    Attributes:
        _data: Field name -> list of values, in arrival order.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, list[str]] | None = None) -> None:
        object.__setattr__(self, "_data", {k: list(v) for k, v in (data or {}).items()})

    @classmethod
    def parse(cls, encoded: bytes | str, encoding: str = "latin-1") -> "Params":
        """Parse ``application/x-www-form-urlencoded`` data (query string or body).

        Raises ``UnicodeDecodeError`` if *encoded* is not valid *encoding*.
        """
        if isinstance(encoded, bytes):
            encoded = encoded.decode(encoding)
        return cls(parse_qs(encoded, keep_blank_values=True))

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Params({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return value as int, or *default* if missing or not numeric."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def to_dict(self) -> dict[str, list[str]]:
        """Copy of the underlying name -> values mapping."""
        return {k: list(v) for k, v in self._data.items()}

    # -- Combining --

    def extend(self, other: "Params") -> "Params":
        """Return new params with *other*'s values appended after ours."""
        data = self.to_dict()
        for key, values in other._data.items():
            data.setdefault(key, []).extend(values)
        return Params(data)

    def replace(self, values: Mapping[str, str]) -> "Params":
        """Return new params where each key in *values* holds only that value.

        Used to lay path parameters over query and form values.
        """
        data = self.to_dict()
        for key, value in values.items():
            data[key] = [value]
        return Params(data)
