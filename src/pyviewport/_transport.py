"""HTTP transport for the coverage API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyviewport.config import ViewportConfig
from pyviewport.exceptions import RecordNotFoundError, ViewportTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`JsonTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any: ...


class JsonTransport:
    """Plain JSON-over-HTTPS GET transport."""

    def __init__(self, config: ViewportConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``base_url + endpoint`` and return the decoded JSON body."""
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        url = f"{self._config.base_url.rstrip('/')}{endpoint}"

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, params=params, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if resp.status == 404:
                    raise RecordNotFoundError(f"Not found: {endpoint}", endpoint=endpoint)
                if resp.status != 200:
                    raise ViewportTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except (ViewportTransportError, RecordNotFoundError):
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ViewportTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ViewportTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc
