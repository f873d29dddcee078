"""HTTP transport for the Dragon Ball API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pydragonball._redact import summarize_for_log
from pydragonball.config import DragonBallConfig
from pydragonball.exceptions import DragonBallNotFoundError, DragonBallTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        ...


class HttpTransport:
    """JSON-over-HTTP transport backed by an ``aiohttp.ClientSession``."""

    def __init__(self, config: DragonBallConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET *endpoint* and return the decoded JSON body.

        Raises
        ------
        DragonBallNotFoundError
            The server answered 404.
        DragonBallTransportError
            Any other non-200 status, a network failure or a body that is
            not JSON.
        """
        url = f"{self._config.base_url}{endpoint}"
        query = {k: str(v) for k, v in (params or {}).items()}
        headers = {"accept": "application/json", "user-agent": self._config.user_agent}

        _logger.debug("GET %s params=%s", url, query)

        try:
            async with self._http.get(url, params=query, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if resp.status == 404:
                    raise DragonBallNotFoundError(
                        f"HTTP 404 from {endpoint}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
                if resp.status != 200:
                    raise DragonBallTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except DragonBallTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise DragonBallTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DragonBallTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc

        _logger.debug("Response from %s: %s", endpoint, summarize_for_log(body))
        return body
