"""Grid models: coordinates, cells, per-lookup results and the grid response."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from pixelgrid.models._base import GridBaseModel
from pixelgrid.models.color import Rgb


class GridMode(StrEnum):
    """Where a grid fetch takes its truth from."""

    ONLINE = "online"
    """Upstream is authoritative; local edits are never shown."""
    LOCALLY = "locally"
    """Upstream-seeded, with local edits overlaid."""


class Coordinate(GridBaseModel):
    """A cell position. Hashable, used as the edit store key."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"[{self.x},{self.y}]"


class ColorCell(GridBaseModel):
    """One grid cell with its color.

    ``team_id`` is ``None`` unless the color came from a local edit or
    the upstream payload reported a team.
    """

    x: int
    y: int
    red: int = Field(alias="Red")
    green: int = Field(alias="Green")
    blue: int = Field(alias="Blue")
    team_id: int | None = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(x=self.x, y=self.y)

    @property
    def rgb(self) -> Rgb:
        return Rgb(red=self.red, green=self.green, blue=self.blue)


class CellResult(GridBaseModel):
    """Outcome of a single upstream lookup.

    Exactly one of ``cell`` and ``error`` is set.
    """

    coordinate: Coordinate
    cell: ColorCell | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.cell is not None


class GridResponse(GridBaseModel):
    """Merged grid plus fetch metrics.

    Parameters
    ----------
    mode : GridMode
        Mode the grid was fetched in.
    cells : list[ColorCell]
        Successfully fetched cells in row-major order (``y`` then ``x``).
        Failed lookups are omitted.
    elapsed_ms : int
        Wall-clock time from dispatch to end of merge, rounded to
        milliseconds.
    request_count : int
        Number of lookups that produced a color.
    failed_count : int
        Number of lookups that failed.
    """

    mode: GridMode
    cells: list[ColorCell] = Field(default_factory=list)
    elapsed_ms: int = 0
    request_count: int = 0
    failed_count: int = 0

    @property
    def attempted_count(self) -> int:
        return self.request_count + self.failed_count

    def cell_at(self, x: int, y: int) -> ColorCell | None:
        for cell in self.cells:
            if cell.x == x and cell.y == y:
                return cell
        return None
