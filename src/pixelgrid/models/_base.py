"""Base model for pixelgrid data.

Every model inherits from :class:`GridBaseModel` which provides:

* ``alias_generator=to_camel`` so snake_case fields serialize to the
  camelCase keys the wire format uses (``team_id`` -> ``teamId``).
* ``populate_by_name`` so models can be built from either spelling.
* ``frozen=True``: instances are immutable and hashable, which lets a
  :class:`~pixelgrid.models.grid.Coordinate` act as a dict key and lets
  an edit entry be swapped in as a single reference.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GridBaseModel(BaseModel):
    """Base for pixelgrid models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with wire aliases, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
