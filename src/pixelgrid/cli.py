"""Command line entry point: run the pixel grid HTTP server.

Usage
-----
::

    pixelgrid-server --port 3000 --grid-size 16
    PIXELGRID_LOCAL_URL=http://localhost:5085/api/color pixelgrid-server -v

Every option falls back to the matching ``PIXELGRID_*`` environment
variable (see :meth:`pixelgrid.config.GridConfig.from_env`).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from aiohttp import web

from pixelgrid.config import GridConfig
from pixelgrid.exceptions import GridConfigError
from pixelgrid.server import GridHTTPServer

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelgrid-server",
        description="Serve the pixel grid backed by the upstream color service.",
    )
    parser.add_argument("--host", help="Interface to bind (default: PIXELGRID_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PIXELGRID_PORT or 3000)")
    parser.add_argument("--grid-size", type=int, help="Grid side length (default: 16)")
    parser.add_argument("--online-url", help="Upstream base address for online mode")
    parser.add_argument("--local-url", help="Upstream base address for locally mode")
    parser.add_argument(
        "--max-concurrency",
        type=int,
        help="Cap on in-flight upstream lookups per grid fetch (default: unbounded)",
    )
    parser.add_argument(
        "--request-timeout",
        type=float,
        help="Per-lookup timeout in seconds (default: none)",
    )
    parser.add_argument("--no-cors", action="store_true", help="Do not send CORS headers")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> GridConfig:
    overrides: dict[str, Any] = {}
    for field_name in (
        "host",
        "port",
        "grid_size",
        "online_url",
        "local_url",
        "max_concurrency",
        "request_timeout",
    ):
        value = getattr(args, field_name)
        if value is not None:
            overrides[field_name] = value
    if args.no_cors:
        overrides["cors_enabled"] = False
    return GridConfig.from_env(**overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except GridConfigError as exc:
        parser.error(str(exc))

    server = GridHTTPServer(config)
    _logger.info("Server running at http://%s:%d", config.host, config.port)
    web.run_app(server.app, host=config.host, port=config.port, print=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
