"""Team and edit models."""

from __future__ import annotations

from pydantic import Field

from pixelgrid.models._base import GridBaseModel
from pixelgrid.models.color import Rgb


class Team(GridBaseModel):
    """A team a cell can be assigned to."""

    id: int = Field(ge=0)
    name: str
    color: Rgb


class EditEntry(GridBaseModel):
    """Stored result of an edit: the team and the color copied from it at write time."""

    team_id: int
    color: Rgb


class EditResult(GridBaseModel):
    """Acknowledgement returned for an accepted edit."""

    success: bool = True
    x: int
    y: int
    team_id: int
    color: Rgb
