"""``restive routes`` — list registered routes.

Resolves an import string to a restive API and prints every route of
every endpoint with method, path, and handler.
"""

import argparse
import sys

from restive.cli._resolve import resolve_api


def format_routes(rows: list[tuple[str, str, str]]) -> list[str]:
    """Lay out (method, path, handler) rows as an aligned table."""
    max_method = max([len(r[0]) for r in rows] + [6])  # "METHOD" header
    max_path = max([len(r[1]) for r in rows] + [4])  # "PATH" header
    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    sep_len = max_method + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    lines = [fmt.format("METHOD", "PATH", "HANDLER"), "-" * min(sep_len, 80)]
    lines.extend(fmt.format(*row) for row in rows)
    return lines


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER table for ``args.api``."""
    try:
        api = resolve_api(args.api)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows: list[tuple[str, str, str]] = []
    for endpoint in api.endpoints:
        for route in endpoint.routes:
            handler = route.handler
            handler_name = getattr(handler, "__qualname__", None) or repr(handler)
            rows.append((route.method, route.path, handler_name))

    if not rows:
        print("No routes registered.")
        return

    for line in format_routes(rows):
        print(line)
