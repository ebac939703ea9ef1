"""Data models for grid cells, teams and edits."""

from pixelgrid.models._base import GridBaseModel
from pixelgrid.models.color import Rgb
from pixelgrid.models.grid import CellResult, ColorCell, Coordinate, GridMode, GridResponse
from pixelgrid.models.requests import EditRequest, GridRequest
from pixelgrid.models.team import EditEntry, EditResult, Team

__all__ = [
    "CellResult",
    "ColorCell",
    "Coordinate",
    "EditEntry",
    "EditRequest",
    "EditResult",
    "GridBaseModel",
    "GridMode",
    "GridRequest",
    "GridResponse",
    "Rgb",
    "Team",
]
