"""Path template compiler.

Turns a human-readable template such as ``/books/:id`` or
``/files/:path*`` into an anchored regular expression with one named
group per placeholder.

Placeholder syntax::

    :name     one path segment, no "/", "#" or "?"
    :name*    one or more of any character, "/" included
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from restive.errors import CompileError

# A placeholder name is any run of characters except / # ? ( ) . and backslash.
_UNESCAPED_DOT = re.compile(r"(?<!\\)\.")
_WILDCARD = re.compile(r":([^/#?()\.\\]+)\*")
_PLACEHOLDER = re.compile(r":([^/#?()\.\\]+)")

SEGMENT_PATTERN = r"[^/#?]+"
WILDCARD_PATTERN = r".+"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A path template compiled into an anchored matcher.

    Immutable, so one instance can be shared by every request thread.
    """

    template: str
    regex: re.Pattern[str]

    @property
    def param_names(self) -> tuple[str, ...]:
        """Placeholder names in template order."""
        return tuple(self.regex.groupindex)

    def match(self, path: str) -> dict[str, str] | None:
        """Match *path* as a whole and return the non-empty captures.

        Returns ``None`` when the path does not match. Captures with an
        empty value are dropped, so an empty parameter and an absent one
        look the same to the caller.
        """
        m = self.regex.match(path)
        if m is None:
            return None
        return {name: value for name, value in m.groupdict().items() if value}


def to_regex(template: str) -> str:
    """Translate *template* into regular expression source.

    The order of the rewrites matters: dots are escaped first so the
    placeholder rules see ``\\.`` as a name terminator, and wildcards
    are rewritten before plain placeholders so ``:name*`` is not read
    as ``:name`` followed by a literal ``*``.

    Examples::

        "/books/:id"      -> r"\\A/books/(?P<id>[^/#?]+)\\Z"
        "/files/:path*"   -> r"\\A/files/(?P<path>.+)\\Z"
        "/v1.0/status"    -> r"\\A/v1\\.0/status\\Z"
    """
    source = _UNESCAPED_DOT.sub(r"\\.", template)
    source = _WILDCARD.sub(rf"(?P<\1>{WILDCARD_PATTERN})", source)
    source = _PLACEHOLDER.sub(rf"(?P<\1>{SEGMENT_PATTERN})", source)
    return rf"\A{source}\Z"


@lru_cache(maxsize=512)
def compile_path(template: str) -> CompiledPattern:
    """Compile a path template into a ``CompiledPattern``.

    Pure and cached: the same template always yields the same matcher.

    Raises:
        CompileError: If the generated expression is invalid, e.g. a
            placeholder name that is not an identifier, a name used
            twice, or unbalanced parentheses in the literal text.
    """
    try:
        regex = re.compile(to_regex(template))
    except re.error as exc:
        raise CompileError(template, str(exc)) from exc
    return CompiledPattern(template=template, regex=regex)
