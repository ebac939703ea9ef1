#!/usr/bin/env python3
"""Fetch the grid once and print it.

Handy for checking an upstream color service by hand: prints every
fetched cell plus the fetch metrics, either as a table or as JSON.

Usage
-----
::

    python scripts/dump_grid.py --mode online
    python scripts/dump_grid.py --mode locally --json --edit 2,5,3

Options::

    --mode MODE          online (default) or locally
    --json               Output as machine-readable JSON
    --edit X,Y,TEAM      Apply a local edit before fetching (repeatable)
    --grid-size N        Override the grid side length
    --max-concurrency N  Cap in-flight lookups
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pixelgrid import GridClient, GridConfig, GridInvalidEditError, GridResponse  # noqa: E402


def _parse_edit(value: str) -> tuple[int, int, int]:
    try:
        x, y, team = (int(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y,TEAM, got {value!r}") from exc
    return x, y, team


def _render_table(grid: GridResponse) -> str:
    lines = [f"mode={grid.mode.value} elapsed={grid.elapsed_ms}ms requests={grid.request_count} failed={grid.failed_count}"]
    for cell in grid.cells:
        team = "" if cell.team_id is None else f" team={cell.team_id}"
        lines.append(f"  [{cell.x:>2},{cell.y:>2}] R={cell.red:>3} G={cell.green:>3} B={cell.blue:>3}{team}")
    return "\n".join(lines)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch and print the pixel grid")
    parser.add_argument("--mode", default="online", help="online (default) or locally")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--edit", action="append", type=_parse_edit, default=[], help="X,Y,TEAM edit to apply first")
    parser.add_argument("--grid-size", type=int, help="Grid side length")
    parser.add_argument("--max-concurrency", type=int, help="Cap on in-flight lookups")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides: dict[str, Any] = {}
    if args.grid_size is not None:
        overrides["grid_size"] = args.grid_size
    if args.max_concurrency is not None:
        overrides["max_concurrency"] = args.max_concurrency
    config = GridConfig.from_env(**overrides)

    async with GridClient(config) as client:
        for x, y, team in args.edit:
            try:
                client.apply_edit(x, y, team)
            except GridInvalidEditError as exc:
                print(f"edit {x},{y},{team} rejected: {exc.reason}", file=sys.stderr)
                return 2
        grid = await client.get_grid(args.mode)

    if args.json_mode:
        print(json.dumps(grid.to_wire(), indent=2))
    else:
        print(_render_table(grid))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
