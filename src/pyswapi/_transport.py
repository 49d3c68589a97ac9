"""HTTP transport: GET a resource and decode its JSON body."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Protocol

import aiohttp

from pyswapi._constants import USER_AGENT
from pyswapi.config import SwapiConfig
from pyswapi.exceptions import (
    SwapiHttpError,
    SwapiNetworkError,
    SwapiParseError,
    SwapiTimeoutError,
)

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by :class:`pyswapi.client.SwapiClient`.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> Any:
        ...


class HttpTransport:
    """Plain HTTPS GET transport with a per-request total timeout."""

    def __init__(self, config: SwapiConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout_seconds)
        self._ssl = config.verify_ssl

    async def get_json(self, endpoint: str) -> Any:
        """Fetch ``base_url + endpoint`` and return the decoded JSON body.

        Raises
        ------
        SwapiTimeoutError
            No complete response within the configured timeout.
        SwapiHttpError
            The service answered with a status code >= 400.
        SwapiNetworkError
            Connection, DNS or TLS failure.
        SwapiParseError
            The body is not valid JSON.
        """
        url = f"{self._config.base_url}{endpoint}"
        headers = {"accept": "application/json", "user-agent": USER_AGENT}

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout, ssl=self._ssl) as resp:
                if resp.status >= 400:
                    raise SwapiHttpError(
                        f"Request failed with status code {resp.status}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
                body = await resp.read()
        except SwapiHttpError:
            raise
        except asyncio.TimeoutError as exc:
            raise SwapiTimeoutError(f"Request timeout for {endpoint}", endpoint=endpoint) from exc
        except aiohttp.ClientError as exc:
            raise SwapiNetworkError(f"Request to {endpoint} failed: {exc}", endpoint=endpoint) from exc

        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            preview = body[:64].decode("utf-8", errors="replace")
            raise SwapiParseError(f"Invalid JSON from {endpoint}: {preview}", endpoint=endpoint) from exc
