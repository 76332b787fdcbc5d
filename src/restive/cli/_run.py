"""``restive run`` — serve an API with uvicorn."""

import argparse
import sys

from restive.cli._resolve import resolve_api
from restive.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.api`` and serve it; ``--host``/``--port`` override config."""
    try:
        api = resolve_api(args.api)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        api.run(host=args.host, port=args.port)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
