"""HTTP transport for upstream color lookups."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from pixelgrid._constants import USER_AGENT
from pixelgrid.config import GridConfig
from pixelgrid.exceptions import GridTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the upstream client.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...


class HttpTransport:
    """aiohttp transport that GETs a URL and decodes the JSON body."""

    def __init__(self, config: GridConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        # ClientTimeout(total=None) disables aiohttp's 5 minute default.
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, url: str) -> Any:
        """GET *url* and return the decoded JSON body.

        Raises
        ------
        GridTransportError
            On network errors, timeouts, non-200 responses and bodies
            that are not JSON.
        """
        headers = {"accept": "application/json", "user-agent": USER_AGENT}

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                raw = await resp.read()
                if resp.status != 200:
                    text = raw.decode("utf-8", errors="replace")
                    raise GridTransportError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        status_code=resp.status,
                        url=url,
                    )
        except GridTransportError:
            raise
        except asyncio.TimeoutError as exc:
            raise GridTransportError(f"Request to {url} timed out", url=url) from exc
        except aiohttp.ClientError as exc:
            raise GridTransportError(f"Request to {url} failed: {exc}", url=url) from exc

        # json.loads accepts bytes; undecodable bytes surface as ValueError too.
        try:
            return json.loads(raw)
        except ValueError as exc:
            preview = raw[:200].decode("utf-8", errors="replace")
            raise GridTransportError(f"Invalid JSON from {url}: {preview}", url=url) from exc
