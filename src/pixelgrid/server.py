"""HTTP server exposing the grid, the team list and pixel edits."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from aiohttp import web

from pixelgrid.client import GridClient
from pixelgrid.config import GridConfig
from pixelgrid.exceptions import GridInvalidEditError, GridModeError

_logger = logging.getLogger(__name__)

_Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

_CORS_ALLOW_METHODS = "GET, POST, OPTIONS"
_CORS_ALLOW_HEADERS = "Content-Type"


@web.middleware
async def cors_middleware(request: web.Request, handler: _Handler) -> web.StreamResponse:
    """Allow every origin, answering preflight requests directly."""
    if request.method == "OPTIONS":
        response: web.StreamResponse = web.Response(status=204)
        response.headers["Access-Control-Allow-Methods"] = _CORS_ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = request.headers.get(
            "Access-Control-Request-Headers", _CORS_ALLOW_HEADERS
        )
    else:
        response = await handler(request)

    origin = request.headers.get("Origin")
    if origin:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Vary"] = "Origin"
    else:
        response.headers["Access-Control-Allow-Origin"] = "*"
    return response


class GridHTTPServer:
    """
    HTTP server for the pixel grid.

    Serves:
    - GET /health - Health check endpoint
    - GET /api/colors?mode=online|locally - Full grid with fetch metrics
    - GET /api/teams - Team catalog
    - POST /api/pixel - Assign a team to a cell (body: {"x", "y", "teamId"})
    """

    def __init__(self, config: GridConfig | None = None, *, client: GridClient | None = None):
        self.config = config or (client.config if client is not None else GridConfig())
        self.client = client or GridClient(self.config)

        middlewares = [cors_middleware] if self.config.cors_enabled else []
        self.app = web.Application(middlewares=middlewares)
        self.app.cleanup_ctx.append(self._client_ctx)
        self._setup_routes()

        _logger.info(
            "GridHTTPServer initialized (port=%d, grid_size=%d)",
            self.config.port,
            self.config.grid_size,
        )

    async def _client_ctx(self, _app: web.Application) -> AsyncIterator[None]:
        async with self.client:
            yield

    def _setup_routes(self) -> None:
        """Configure HTTP routes."""
        self.app.router.add_get("/health", self._handle_health)
        self.app.router.add_get("/api/colors", self._handle_colors)
        self.app.router.add_get("/api/teams", self._handle_teams)
        self.app.router.add_post("/api/pixel", self._handle_pixel)

    async def _handle_health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    async def _handle_colors(self, request: web.Request) -> web.Response:
        """GET /api/colors - Fetch every cell; mode defaults to online."""
        mode = request.query.get("mode") or None
        try:
            grid = await self.client.get_grid(mode)
        except GridModeError as exc:
            return web.json_response({"error": str(exc)}, status=400)

        return web.json_response(
            {
                "data": [cell.to_wire() for cell in grid.cells],
                "responseTime": grid.elapsed_ms,
                "totalRequests": grid.request_count,
                "failedRequests": grid.failed_count,
                "mode": grid.mode.value,
            }
        )

    async def _handle_teams(self, request: web.Request) -> web.Response:
        """GET /api/teams - List all teams ordered by id."""
        return web.json_response({"teams": [team.to_wire() for team in self.client.get_teams()]})

    async def _handle_pixel(self, request: web.Request) -> web.Response:
        """POST /api/pixel - Record a local edit."""
        try:
            body = await request.json()
        except ValueError:
            return web.json_response({"error": "Request body must be JSON"}, status=400)
        if not isinstance(body, dict):
            return web.json_response({"error": "Request body must be a JSON object"}, status=400)

        try:
            result = self.client.apply_edit(body.get("x"), body.get("y"), body.get("teamId"))
        except GridInvalidEditError as exc:
            _logger.info("Rejected pixel edit: %s", exc.reason)
            return web.json_response({"error": exc.reason}, status=400)

        return web.json_response(result.to_wire())


def create_app(config: GridConfig | None = None, *, client: GridClient | None = None) -> web.Application:
    """Build the aiohttp application for *config*."""
    return GridHTTPServer(config, client=client).app
