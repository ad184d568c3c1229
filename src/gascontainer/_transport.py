"""HTTP JSON transport used by :class:`gascontainer.client.GasContainerClient`."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from gascontainer.exceptions import GasTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> dict[str, Any]:
        ...

    async def post_json(self, endpoint: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        ...


class HttpTransport:
    """aiohttp-backed transport that maps every failure to :class:`GasTransportError`."""

    def __init__(self, base_url: str, http_session: aiohttp.ClientSession) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http_session

    async def get_json(self, endpoint: str) -> dict[str, Any]:
        return await self._request("GET", endpoint, None)

    async def post_json(self, endpoint: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", endpoint, payload)

    async def _request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{endpoint}"
        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, json=dict(payload) if payload is not None else None) as resp:
                text = await resp.text()
                if resp.status != 200:
                    raise GasTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except GasTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise GasTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        try:
            body: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise GasTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc

        if not isinstance(body, dict):
            raise GasTransportError(
                f"Expected a JSON object from {endpoint}",
                endpoint=endpoint,
            )
        return body
