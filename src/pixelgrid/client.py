"""High-level async client for the pixel grid."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pixelgrid._transport import HttpTransport, Transport
from pixelgrid.aggregator import GridAggregator
from pixelgrid.config import GridConfig
from pixelgrid.exceptions import GridError
from pixelgrid.models.grid import Coordinate, GridMode, GridResponse
from pixelgrid.models.team import EditEntry, EditResult, Team
from pixelgrid.state.store import EditStore
from pixelgrid.teams import TeamRegistry

_logger = logging.getLogger(__name__)


class GridClient:
    """Async facade over the grid aggregator, edit store and team registry.

    Usage::

        async with GridClient(config) as client:
            grid = await client.get_grid("locally")
            client.apply_edit(2, 5, 3)

    The edit store and registry are injectable so tests (and embedding
    applications) can hold isolated instances.
    """

    def __init__(
        self,
        config: GridConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        registry: TeamRegistry | None = None,
        store: EditStore | None = None,
    ) -> None:
        self._config = config or GridConfig()
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._transport = transport
        self._registry = registry if registry is not None else TeamRegistry.default()
        self._store = store if store is not None else EditStore(self._registry, self._config.grid_size)
        self._aggregator: GridAggregator | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GridClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        self._aggregator = GridAggregator(self._config, self._transport, self._store)
        _logger.debug("Grid client ready (grid_size=%d)", self._config.grid_size)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None
        self._aggregator = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def store(self) -> EditStore:
        return self._store

    @property
    def registry(self) -> TeamRegistry:
        return self._registry

    def _require_aggregator(self) -> GridAggregator:
        if self._aggregator is None:
            raise GridError("Client not initialized. Use 'async with GridClient(...) as client:'")
        return self._aggregator

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_grid(self, mode: GridMode | str | None = None) -> GridResponse:
        """Fetch the full grid; ``locally`` overlays local edits."""
        return await self._require_aggregator().fetch_grid(mode)

    def get_teams(self) -> list[Team]:
        return self._registry.list_teams()

    def apply_edit(self, x: Any, y: Any, team_id: Any) -> EditResult:
        """Record a local edit.

        Raises
        ------
        GridInvalidEditError
            If the coordinate is off the grid or the team is unknown.
        """
        color = self._store.apply_edit(x, y, team_id)
        return EditResult(x=x, y=y, team_id=team_id, color=color)

    def lookup_edit(self, x: int, y: int) -> EditEntry | None:
        return self._store.lookup(Coordinate(x=x, y=y))
