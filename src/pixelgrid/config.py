"""Client and server configuration for pixelgrid."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pixelgrid._constants import DEFAULT_GRID_SIZE, DEFAULT_HOST, DEFAULT_PORT, LOCAL_URL, ONLINE_URL
from pixelgrid.exceptions import GridConfigError
from pixelgrid.models.grid import GridMode


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, cast: type[int] | type[float]) -> int | float:
    try:
        return cast(value)
    except ValueError as exc:
        raise GridConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class GridConfig:
    """Grid configuration.

    Parameters
    ----------
    online_url : str
        Upstream base address used in ``online`` mode.
    local_url : str
        Upstream base address used in ``locally`` mode.
    grid_size : int
        Side length ``S`` of the square grid. Coordinates run from
        ``0`` to ``S - 1`` on both axes. ``0`` is allowed and yields an
        empty grid.
    max_concurrency : int or None
        Upper bound on in-flight upstream lookups per grid fetch.
        ``None`` dispatches all ``S * S`` lookups at once.
    request_timeout : float or None
        Per-lookup timeout in seconds. ``None`` disables the timeout, so
        a hung upstream call holds the whole grid fetch.
    host : str
        Interface the HTTP server binds to.
    port : int
        Port the HTTP server listens on.
    cors_enabled : bool
        Reflect the request origin in CORS headers.
    """

    online_url: str = ONLINE_URL
    local_url: str = LOCAL_URL
    grid_size: int = DEFAULT_GRID_SIZE
    max_concurrency: int | None = None
    request_timeout: float | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_enabled: bool = True

    def __post_init__(self) -> None:
        if self.grid_size < 0:
            raise GridConfigError(f"grid_size must be >= 0, got {self.grid_size}")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise GridConfigError(f"max_concurrency must be >= 1, got {self.max_concurrency}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise GridConfigError(f"request_timeout must be > 0, got {self.request_timeout}")

    @property
    def upstream_urls(self) -> dict[GridMode, str]:
        """Upstream base address per mode, without trailing slash."""
        return {
            GridMode.ONLINE: self.online_url.rstrip("/"),
            GridMode.LOCALLY: self.local_url.rstrip("/"),
        }

    @classmethod
    def from_env(cls, **overrides: Any) -> GridConfig:
        """Create configuration from ``PIXELGRID_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        GridConfigError
            If a numeric variable cannot be parsed or a value is out of range.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PIXELGRID_ONLINE_URL": "online_url",
            "PIXELGRID_LOCAL_URL": "local_url",
            "PIXELGRID_HOST": "host",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        _ENV_NUMERIC_MAP: dict[str, tuple[str, type[int] | type[float]]] = {
            "PIXELGRID_GRID_SIZE": ("grid_size", int),
            "PIXELGRID_MAX_CONCURRENCY": ("max_concurrency", int),
            "PIXELGRID_REQUEST_TIMEOUT": ("request_timeout", float),
            "PIXELGRID_PORT": ("port", int),
        }
        for env_key, (field_name, cast) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is not None and val.strip() and field_name not in overrides:
                config_kwargs[field_name] = _env_number(env_key, val.strip(), cast)

        if "cors_enabled" not in overrides:
            config_kwargs["cors_enabled"] = _env_bool(env.get("PIXELGRID_CORS_ENABLED"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
