"""Mount table — which endpoint serves a request path.

Each registered resource is mounted at a root. A request belongs to the
mount whose root equals its path or is a ``/``-delimited prefix of it;
when several roots qualify the longest one wins.
"""

from dataclasses import dataclass

from restive.routing.endpoint import Endpoint


@dataclass(frozen=True, slots=True)
class Mount:
    """A resource and its frozen endpoint under a root path."""

    root: str
    endpoint: Endpoint
    resource: object

    def covers(self, path: str) -> bool:
        """True if *path* falls under this mount's root."""
        root = self.root.rstrip("/")
        if not root:
            return path.startswith("/")
        return path == root or path.startswith(root + "/")


class MountTable:
    """Immutable lookup from request path to ``Mount``."""

    __slots__ = ("_mounts",)

    def __init__(self, mounts: tuple[Mount, ...] | list[Mount] = ()) -> None:
        # Longest root first; sorted() is stable so ties keep registration order.
        self._mounts: tuple[Mount, ...] = tuple(
            sorted(mounts, key=lambda m: len(m.root.rstrip("/")), reverse=True)
        )

    def __len__(self) -> int:
        return len(self._mounts)

    def __iter__(self):
        return iter(self._mounts)

    def resolve(self, path: str) -> Mount | None:
        """Return the mount serving *path*, or ``None``."""
        for mount in self._mounts:
            if mount.covers(path):
                return mount
        return None
