"""
Main entry point for the gradle.properties Language Server.

This file is executed when running: python -m gradlepropls

The server communicates with editors via stdin/stdout using JSON-RPC.
"""
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from pathlib import Path

from gradlepropls import __version__
from gradlepropls.config import ServerSettings
from gradlepropls.errors import CatalogError
from gradlepropls.lsp.server import create_server


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gradlepropls",
        description="Language server with key completion for gradle.properties files",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="YAML property catalog to use instead of the packaged one",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log the resolved completion fragment of every request",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> ServerSettings:
    """Environment settings, overridden by command line flags."""
    settings = ServerSettings.from_env()
    if args.catalog is not None:
        settings = replace(settings, catalog_path=args.catalog)
    if args.trace:
        settings = replace(settings, trace=True)
    return settings


def main(argv: list[str] | None = None) -> int:
    """Start the language server on stdin/stdout."""
    args = parse_args(argv)

    if os.getenv("DEBUG"):
        # stdout carries the protocol, so debug chatter goes to stderr
        print("Waiting for debugger to attach on port 5678...", file=sys.stderr)
        try:
            import debugpy  # type: ignore
            debugpy.listen(("127.0.0.1", 5678))
            debugpy.wait_for_client()
        except ImportError:
            print("debugpy not available - install it to enable DEBUG", file=sys.stderr)

    try:
        server = create_server(settings=build_settings(args))
    except CatalogError as e:
        print(f"gradlepropls: {e}", file=sys.stderr)
        return 1

    # Start the server - it will listen on stdin/stdout for LSP messages
    # from the editor client
    server.start_io()
    return 0


if __name__ == "__main__":
    sys.exit(main())
