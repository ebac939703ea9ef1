"""In-memory store of local cell edits.

This is the only component allowed to write edit entries. The grid
aggregator reads from it at merge time and never mutates it.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from pydantic import ValidationError

from pixelgrid.exceptions import GridInvalidEditError
from pixelgrid.models.color import Rgb
from pixelgrid.models.grid import Coordinate
from pixelgrid.models.requests import EditRequest
from pixelgrid.models.team import EditEntry
from pixelgrid.teams import TeamRegistry

_logger = logging.getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ()))
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid edit request"


class EditStore:
    """Coordinate -> :class:`EditEntry` mapping.

    Entries are immutable; a write replaces the whole entry under a lock,
    so a concurrent :meth:`lookup` sees either the previous entry or the
    new one, never a team id paired with another write's color. Entries
    are never removed and do not survive a restart.
    """

    def __init__(self, registry: TeamRegistry, grid_size: int) -> None:
        self._registry = registry
        self._grid_size = grid_size
        self._entries: dict[Coordinate, EditEntry] = {}
        self._write_lock = threading.Lock()

    @property
    def grid_size(self) -> int:
        return self._grid_size

    def apply_edit(self, x: Any, y: Any, team_id: Any) -> Rgb:
        """Assign *team_id* to the cell at (*x*, *y*).

        Returns the team's color. Any existing entry for the cell is
        overwritten.

        Raises
        ------
        GridInvalidEditError
            If the values are not integers, the coordinate is outside the
            grid, or no team has the given id. The store is not modified.
        """
        try:
            request = EditRequest(x=x, y=y, team_id=team_id)
        except ValidationError as exc:
            raise GridInvalidEditError(_describe_validation_error(exc)) from exc

        upper = self._grid_size - 1
        if not (0 <= request.x <= upper and 0 <= request.y <= upper):
            raise GridInvalidEditError(
                f"Invalid coordinates [{request.x},{request.y}]: must be within 0..{upper}"
                if self._grid_size
                else f"Invalid coordinates [{request.x},{request.y}]: grid is empty"
            )

        team = self._registry.get(request.team_id)
        if team is None:
            raise GridInvalidEditError(f"Invalid teamId {request.team_id}: must be within 0..{len(self._registry) - 1}")

        coordinate = Coordinate(x=request.x, y=request.y)
        entry = EditEntry(team_id=team.id, color=team.color)
        with self._write_lock:
            self._entries[coordinate] = entry

        _logger.info("Updated pixel %s to team %d", coordinate, team.id)
        return team.color

    def lookup(self, coordinate: Coordinate) -> EditEntry | None:
        """Return the entry for *coordinate*, or ``None`` if it was never edited."""
        return self._entries.get(coordinate)

    def snapshot(self) -> dict[Coordinate, EditEntry]:
        """Point-in-time copy of all entries."""
        with self._write_lock:
            return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
