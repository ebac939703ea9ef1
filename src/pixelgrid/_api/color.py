"""Single-cell color lookup.

Endpoint:
  - {base_url}/{y}/{x}  ->  {"Red": int, "Green": int, "Blue": int}

The upstream addresses cells row first, so ``y`` precedes ``x`` in the path.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pixelgrid._transport import Transport
from pixelgrid.exceptions import GridPayloadError
from pixelgrid.models.grid import ColorCell, Coordinate

_logger = logging.getLogger(__name__)

_TEAM_ID_LOCS = {("teamId",), ("team_id",)}


def build_cell_url(base_url: str, coordinate: Coordinate) -> str:
    return f"{base_url.rstrip('/')}/{coordinate.y}/{coordinate.x}"


def _parse_color_cell(url: str, coordinate: Coordinate, data: Any) -> ColorCell:
    """Parse an upstream payload into a cell at *coordinate*.

    Channel values are not range checked. A ``teamId`` reported by the
    upstream is kept when it parses as an integer and ignored otherwise.
    """
    if not isinstance(data, dict):
        raise GridPayloadError(f"Expected a JSON object from {url}, got {type(data).__name__}", url=url)
    merged = dict(data)
    merged["x"] = coordinate.x
    merged["y"] = coordinate.y
    try:
        return ColorCell.model_validate(merged)
    except ValidationError as exc:
        if "teamId" not in merged or not all(err["loc"][:1] in _TEAM_ID_LOCS for err in exc.errors()):
            raise GridPayloadError(
                f"Malformed color payload from {url}: {exc.error_count()} error(s)", url=url
            ) from exc
    _logger.debug("Ignoring unparseable teamId %r from %s", merged.pop("teamId"), url)
    return ColorCell.model_validate(merged)


async def fetch_cell_color(transport: Transport, base_url: str, coordinate: Coordinate) -> ColorCell:
    """Look up the color of one cell.

    The caller guarantees *coordinate* is within the grid. No retry is
    attempted.

    Raises
    ------
    GridTransportError
        If the request fails at the HTTP level.
    GridPayloadError
        If the response is not a color object.
    """
    url = build_cell_url(base_url, coordinate)
    data = await transport.get_json(url)
    cell = _parse_color_cell(url, coordinate, data)
    _logger.debug(
        "Fetched [%d,%d]: R=%d, G=%d, B=%d",
        coordinate.y,
        coordinate.x,
        cell.red,
        cell.green,
        cell.blue,
    )
    return cell
