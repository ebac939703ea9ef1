"""Pydantic request models for client entrypoints.

These models provide a consistent "validate -> normalize -> execute" flow.
They are used internally by the edit store and the grid aggregator.
"""

from __future__ import annotations

from pydantic import ConfigDict

from pixelgrid.models._base import GridBaseModel
from pixelgrid.models.grid import GridMode


class GridRequest(GridBaseModel):
    """Request for a full grid fetch."""

    mode: GridMode = GridMode.ONLINE


class EditRequest(GridBaseModel):
    """Request to assign a team to a cell.

    Strict: booleans, floats and numeric strings are rejected rather than
    coerced. Range checks depend on the running grid size and team table,
    so they happen in :class:`pixelgrid.state.store.EditStore`.
    """

    model_config = ConfigDict(strict=True)

    x: int
    y: int
    team_id: int
