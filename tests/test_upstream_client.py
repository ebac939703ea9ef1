from __future__ import annotations

from typing import Any

import pytest
from fakes import FakeColorUpstream

from pixelgrid._api.color import build_cell_url, fetch_cell_color
from pixelgrid.exceptions import GridPayloadError, GridTransportError
from pixelgrid.models.grid import Coordinate

_BASE = "http://upstream.test/api/color"


def test_url_puts_row_before_column() -> None:
    assert build_cell_url(_BASE, Coordinate(x=2, y=5)) == f"{_BASE}/5/2"
    assert build_cell_url(_BASE + "/", Coordinate(x=0, y=15)) == f"{_BASE}/15/0"


@pytest.mark.asyncio
async def test_fetch_parses_color() -> None:
    upstream = FakeColorUpstream(payloads={(2, 5): {"Red": 10, "Green": 20, "Blue": 30}})

    cell = await fetch_cell_color(upstream, _BASE, Coordinate(x=2, y=5))

    assert upstream.calls == [f"{_BASE}/5/2"]
    assert (cell.x, cell.y) == (2, 5)
    assert cell.rgb.as_tuple() == (10, 20, 30)
    assert cell.team_id is None


@pytest.mark.asyncio
async def test_fetch_keeps_upstream_team_and_ignores_foreign_coordinates() -> None:
    upstream = FakeColorUpstream(
        payloads={(1, 1): {"Red": 1, "Green": 2, "Blue": 3, "teamId": 9, "x": 7, "y": 7}},
    )

    cell = await fetch_cell_color(upstream, _BASE, Coordinate(x=1, y=1))

    assert cell.team_id == 9
    assert (cell.x, cell.y) == (1, 1)


@pytest.mark.asyncio
async def test_unparseable_upstream_team_is_ignored() -> None:
    upstream = FakeColorUpstream(payloads={(0, 3): {"Red": 1, "Green": 2, "Blue": 3, "teamId": "red"}})

    cell = await fetch_cell_color(upstream, _BASE, Coordinate(x=0, y=3))

    assert cell.rgb.as_tuple() == (1, 2, 3)
    assert cell.team_id is None


@pytest.mark.asyncio
async def test_out_of_range_channels_are_not_clamped() -> None:
    upstream = FakeColorUpstream(payloads={(0, 0): {"Red": 512, "Green": -1, "Blue": 0}})

    cell = await fetch_cell_color(upstream, _BASE, Coordinate(x=0, y=0))

    assert cell.rgb.as_tuple() == (512, -1, 0)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        [1, 2, 3],
        "red",
        {"Red": 1, "Green": 2},
        {"Red": "bright", "Green": 2, "Blue": 3},
        {"Red": 1, "Green": 2, "teamId": "red"},
    ],
)
async def test_malformed_payload_raises(payload: Any) -> None:
    upstream = FakeColorUpstream(payloads={(0, 0): payload})

    with pytest.raises(GridPayloadError) as exc_info:
        await fetch_cell_color(upstream, _BASE, Coordinate(x=0, y=0))

    assert exc_info.value.url == f"{_BASE}/0/0"


@pytest.mark.asyncio
async def test_transport_failure_propagates_without_retry() -> None:
    upstream = FakeColorUpstream(failing={(3, 4)})

    with pytest.raises(GridTransportError):
        await fetch_cell_color(upstream, _BASE, Coordinate(x=3, y=4))

    assert len(upstream.calls) == 1
