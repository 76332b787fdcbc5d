"""Restive CLI — serve an API and list its routes.

Entry point registered as ``restive`` in ``pyproject.toml``::

    [project.scripts]
    restive = "restive.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``restive`` command."""
    parser = argparse.ArgumentParser(
        prog="restive",
        description="Restive — route HTTP verbs to resource methods and answer in JSON.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- restive run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve an API")
    run_parser.add_argument("api", help="Import string (e.g. myapp:api)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- restive routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("api", help="Import string (e.g. myapp:api)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from restive.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from restive.cli._routes import run_routes

        run_routes(args)
