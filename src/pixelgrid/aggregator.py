"""Concurrent grid fetch with local-edit overlay.

One upstream lookup is dispatched per coordinate, all at once unless
``GridConfig.max_concurrency`` caps them. Every lookup is awaited; a
failed lookup becomes a failed :class:`CellResult` and is dropped from
the response at assembly time. In ``locally`` mode an edit entry for a
coordinate replaces the upstream color and team entirely.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from pixelgrid._api.color import fetch_cell_color
from pixelgrid._transport import Transport
from pixelgrid.config import GridConfig
from pixelgrid.exceptions import GridModeError, GridPayloadError, GridTransportError
from pixelgrid.models.grid import CellResult, ColorCell, Coordinate, GridMode, GridResponse
from pixelgrid.models.requests import GridRequest
from pixelgrid.state.store import EditStore

_logger = logging.getLogger(__name__)

CellFetcher = Callable[[Transport, str, Coordinate], Awaitable[ColorCell]]


def _round_ms(seconds: float) -> int:
    """Seconds to whole milliseconds, rounding halves up."""
    return int(seconds * 1000 + 0.5)


def resolve_mode(mode: GridMode | str | None) -> GridMode:
    """Normalize *mode*; ``None`` means ``online``.

    Raises
    ------
    GridModeError
        If *mode* is not a known mode.
    """
    if mode is None:
        return GridMode.ONLINE
    try:
        return GridRequest(mode=mode).mode
    except ValidationError as exc:
        allowed = ", ".join(m.value for m in GridMode)
        raise GridModeError(f"Unknown mode {mode!r}; expected one of: {allowed}") from exc


def iter_coordinates(grid_size: int) -> list[Coordinate]:
    """All coordinates in row-major order (``y`` outer, ``x`` inner)."""
    return [Coordinate(x=x, y=y) for y in range(grid_size) for x in range(grid_size)]


def overlay_edits(cells: list[ColorCell], store: EditStore) -> list[ColorCell]:
    """Replace each cell that has an edit entry with the entry's color and team."""
    merged: list[ColorCell] = []
    for cell in cells:
        entry = store.lookup(cell.coordinate)
        if entry is None:
            merged.append(cell)
            continue
        merged.append(
            ColorCell(
                x=cell.x,
                y=cell.y,
                red=entry.color.red,
                green=entry.color.green,
                blue=entry.color.blue,
                team_id=entry.team_id,
            )
        )
    return merged


class GridAggregator:
    """Fetches the full grid for a mode and merges local edits.

    Parameters
    ----------
    config : GridConfig
        Grid size, upstream addresses, concurrency cap and timeout.
    transport : Transport
        Used for every upstream lookup.
    store : EditStore
        Read at merge time in ``locally`` mode.
    fetcher : callable, optional
        Single-cell lookup; defaults to :func:`fetch_cell_color`.
    """

    def __init__(
        self,
        config: GridConfig,
        transport: Transport,
        store: EditStore,
        *,
        fetcher: CellFetcher = fetch_cell_color,
    ) -> None:
        self._config = config
        self._transport = transport
        self._store = store
        self._fetcher = fetcher

    def _base_url(self, mode: GridMode) -> str:
        base_url = self._config.upstream_urls.get(mode)
        if not base_url:
            raise GridModeError(f"No upstream address configured for mode {mode.value!r}")
        return base_url

    async def _fetch_one(
        self,
        base_url: str,
        coordinate: Coordinate,
        semaphore: asyncio.Semaphore | None,
    ) -> CellResult:
        guard: Any = semaphore if semaphore is not None else contextlib.nullcontext()
        try:
            async with guard:
                if self._config.request_timeout is None:
                    cell = await self._fetcher(self._transport, base_url, coordinate)
                else:
                    cell = await asyncio.wait_for(
                        self._fetcher(self._transport, base_url, coordinate),
                        timeout=self._config.request_timeout,
                    )
        except asyncio.TimeoutError:
            _logger.warning("Error fetching color for [%d,%d]: timed out", coordinate.y, coordinate.x)
            return CellResult(coordinate=coordinate, error="timed out")
        except (GridTransportError, GridPayloadError) as exc:
            _logger.warning("Error fetching color for [%d,%d]: %s", coordinate.y, coordinate.x, exc)
            return CellResult(coordinate=coordinate, error=str(exc))
        return CellResult(coordinate=coordinate, cell=cell)

    async def fetch_results(self, mode: GridMode | str | None = None) -> list[CellResult]:
        """Look up every cell and return one result per coordinate, row-major."""
        base_url = self._base_url(resolve_mode(mode))
        semaphore = asyncio.Semaphore(self._config.max_concurrency) if self._config.max_concurrency else None
        coordinates = iter_coordinates(self._config.grid_size)
        return list(await asyncio.gather(*(self._fetch_one(base_url, c, semaphore) for c in coordinates)))

    async def fetch_grid(self, mode: GridMode | str | None = None) -> GridResponse:
        """Fetch the whole grid for *mode*.

        Never raises for failed lookups; they are omitted and counted in
        ``failed_count``.

        Raises
        ------
        GridModeError
            If *mode* is unknown or has no upstream address.
        """
        resolved = resolve_mode(mode)
        self._base_url(resolved)

        start = time.perf_counter()
        results = await self.fetch_results(resolved)

        cells = [result.cell for result in results if result.cell is not None]
        failed = len(results) - len(cells)
        if resolved is GridMode.LOCALLY:
            cells = overlay_edits(cells, self._store)

        elapsed = time.perf_counter() - start
        response = GridResponse(
            mode=resolved,
            cells=cells,
            elapsed_ms=_round_ms(elapsed),
            request_count=len(results) - failed,
            failed_count=failed,
        )
        _logger.info(
            "Fetch completed in %.2fms (mode=%s, requests=%d, failed=%d)",
            elapsed * 1000,
            resolved.value,
            response.request_count,
            response.failed_count,
        )
        return response
