"""Tests for model parsing and wire serialization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pixelgrid.models import (
    ColorCell,
    Coordinate,
    EditRequest,
    EditResult,
    GridMode,
    GridRequest,
    GridResponse,
    Rgb,
    Team,
)


class TestRgb:
    def test_parses_capitalized_channel_keys(self) -> None:
        rgb = Rgb.model_validate({"Red": 255, "Green": 128, "Blue": 0})
        assert rgb.as_tuple() == (255, 128, 0)

    def test_wire_format_uses_capitalized_keys(self) -> None:
        assert Rgb(red=1, green=2, blue=3).to_wire() == {"Red": 1, "Green": 2, "Blue": 3}

    def test_out_of_range_values_pass_through(self) -> None:
        rgb = Rgb.model_validate({"Red": 300, "Green": -4, "Blue": 0})
        assert rgb.red == 300
        assert rgb.green == -4

    def test_is_immutable(self) -> None:
        rgb = Rgb(red=1, green=2, blue=3)
        with pytest.raises(ValidationError):
            rgb.red = 9  # type: ignore[misc]


class TestColorCell:
    def test_wire_format_omits_missing_team(self) -> None:
        cell = ColorCell(x=2, y=5, red=10, green=20, blue=30)
        assert cell.to_wire() == {"x": 2, "y": 5, "Red": 10, "Green": 20, "Blue": 30}

    def test_wire_format_includes_team_when_set(self) -> None:
        cell = ColorCell(x=2, y=5, red=255, green=255, blue=0, team_id=3)
        assert cell.to_wire()["teamId"] == 3

    def test_accepts_team_id_alias(self) -> None:
        cell = ColorCell.model_validate({"x": 0, "y": 0, "Red": 0, "Green": 0, "Blue": 0, "teamId": 4})
        assert cell.team_id == 4

    def test_coordinate_and_rgb_views(self) -> None:
        cell = ColorCell(x=1, y=2, red=3, green=4, blue=5)
        assert cell.coordinate == Coordinate(x=1, y=2)
        assert cell.rgb == Rgb(red=3, green=4, blue=5)


class TestCoordinate:
    def test_hashable_and_equal_by_value(self) -> None:
        lookup = {Coordinate(x=2, y=5): "edited"}
        assert lookup[Coordinate(x=2, y=5)] == "edited"
        assert Coordinate(x=5, y=2) not in lookup

    def test_str(self) -> None:
        assert str(Coordinate(x=2, y=5)) == "[2,5]"


class TestGridResponse:
    def test_aliases_and_attempted_count(self) -> None:
        grid = GridResponse(mode=GridMode.ONLINE, elapsed_ms=12, request_count=250, failed_count=6)
        wire = grid.to_wire()
        assert wire["elapsedMs"] == 12
        assert wire["requestCount"] == 250
        assert wire["failedCount"] == 6
        assert wire["mode"] == "online"
        assert grid.attempted_count == 256

    def test_cell_at(self) -> None:
        cell = ColorCell(x=1, y=1, red=0, green=0, blue=0)
        grid = GridResponse(mode=GridMode.LOCALLY, cells=[cell])
        assert grid.cell_at(1, 1) is cell
        assert grid.cell_at(0, 1) is None


class TestRequests:
    def test_grid_request_defaults_to_online(self) -> None:
        assert GridRequest().mode is GridMode.ONLINE

    def test_grid_request_rejects_unknown_mode(self) -> None:
        with pytest.raises(ValidationError):
            GridRequest(mode="offline")

    @pytest.mark.parametrize("bad", [True, "3", 3.0, None])
    def test_edit_request_is_strict(self, bad: object) -> None:
        with pytest.raises(ValidationError):
            EditRequest(x=bad, y=0, team_id=0)

    def test_edit_request_accepts_wire_alias(self) -> None:
        request = EditRequest.model_validate({"x": 1, "y": 2, "teamId": 3})
        assert request.team_id == 3


def test_team_and_edit_result_wire_format() -> None:
    team = Team(id=3, name="Team 3", color=Rgb(red=255, green=255, blue=0))
    assert team.to_wire() == {"id": 3, "name": "Team 3", "color": {"Red": 255, "Green": 255, "Blue": 0}}

    result = EditResult(x=2, y=5, team_id=3, color=team.color)
    assert result.to_wire() == {
        "success": True,
        "x": 2,
        "y": 5,
        "teamId": 3,
        "color": {"Red": 255, "Green": 255, "Blue": 0},
    }
