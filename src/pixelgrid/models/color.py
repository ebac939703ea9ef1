"""RGB color model."""

from __future__ import annotations

from pydantic import Field

from pixelgrid.models._base import GridBaseModel


class Rgb(GridBaseModel):
    """An RGB triple.

    Serialized as ``{"Red": r, "Green": g, "Blue": b}``. No range check is
    applied: values reported by the upstream service are passed through
    unmodified.
    """

    red: int = Field(alias="Red")
    green: int = Field(alias="Green")
    blue: int = Field(alias="Blue")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @classmethod
    def from_tuple(cls, value: tuple[int, int, int]) -> Rgb:
        red, green, blue = value
        return cls(red=red, green=green, blue=blue)
