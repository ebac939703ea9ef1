"""pixelgrid - Async aggregator for a team-colored pixel grid."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pixelgrid")
except PackageNotFoundError:
    __version__ = "0+local"
from pixelgrid.aggregator import GridAggregator
from pixelgrid.client import GridClient
from pixelgrid.config import GridConfig
from pixelgrid.exceptions import (
    GridConfigError,
    GridError,
    GridInvalidEditError,
    GridModeError,
    GridPayloadError,
    GridTransportError,
)
from pixelgrid.models import (
    CellResult,
    ColorCell,
    Coordinate,
    EditEntry,
    EditResult,
    GridMode,
    GridResponse,
    Rgb,
    Team,
)
from pixelgrid.state.store import EditStore
from pixelgrid.teams import TeamRegistry

__all__ = [
    "__version__",
    "CellResult",
    "ColorCell",
    "Coordinate",
    "EditEntry",
    "EditResult",
    "EditStore",
    "GridAggregator",
    "GridClient",
    "GridConfig",
    "GridConfigError",
    "GridError",
    "GridInvalidEditError",
    "GridMode",
    "GridModeError",
    "GridPayloadError",
    "GridResponse",
    "GridTransportError",
    "Rgb",
    "Team",
    "TeamRegistry",
]
