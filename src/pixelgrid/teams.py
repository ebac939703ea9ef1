"""Fixed, ordered team catalog."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pixelgrid._constants import TEAM_COLORS
from pixelgrid.exceptions import GridConfigError
from pixelgrid.models.color import Rgb
from pixelgrid.models.team import Team


def default_teams() -> list[Team]:
    """The sixteen built-in teams, ``Team 0`` to ``Team 15``."""
    return [Team(id=idx, name=f"Team {idx}", color=Rgb.from_tuple(rgb)) for idx, rgb in enumerate(TEAM_COLORS)]


class TeamRegistry:
    """Read-only mapping from team id to :class:`Team`.

    Identifiers must be unique and contiguous from ``0``. The registry
    has no mutation operations, so one instance can be shared by every
    request without locking.
    """

    def __init__(self, teams: Iterable[Team]) -> None:
        ordered = sorted(teams, key=lambda team: team.id)
        ids = [team.id for team in ordered]
        if ids != list(range(len(ordered))):
            raise GridConfigError(f"team ids must be unique and contiguous from 0, got {ids}")
        self._teams: tuple[Team, ...] = tuple(ordered)

    @classmethod
    def default(cls) -> TeamRegistry:
        return cls(default_teams())

    def list_teams(self) -> list[Team]:
        """All teams ordered by id."""
        return list(self._teams)

    def get(self, team_id: object) -> Team | None:
        """Return the team for *team_id*, or ``None`` if there is none."""
        if isinstance(team_id, bool) or not isinstance(team_id, int):
            return None
        if 0 <= team_id < len(self._teams):
            return self._teams[team_id]
        return None

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams)

    def __contains__(self, team_id: object) -> bool:
        return self.get(team_id) is not None
