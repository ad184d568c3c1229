"""Async client for the gas container HTTP interface."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import aiohttp
from pydantic import ValidationError

from gascontainer import _constants as const
from gascontainer._transport import HttpTransport, Transport
from gascontainer.config import ClientConfig
from gascontainer.exceptions import GasApiError, GasError
from gascontainer.models import GasBaseModel, GasContainerState, MassAdjustmentResponse, MassRequest

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=GasBaseModel)


def _parse(model: type[M], endpoint: str, body: dict[str, Any]) -> M:
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise GasApiError(
            f"{endpoint} returned an unexpected payload: {body!r}",
            endpoint=endpoint,
        ) from exc


class GasContainerClient:
    """Async client for a gas container server.

    Usage::

        async with GasContainerClient(ClientConfig()) as client:
            state = await client.get_container_state()
            reply = await client.add_mass(2.0)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GasContainerClient:
        if self._transport is None:
            if self._http_session is None:
                timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)
                self._http_session = aiohttp.ClientSession(timeout=timeout)
            self._transport = HttpTransport(self._config.base_url, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise GasError("Client not initialized. Use 'async with GasContainerClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_container_state(self) -> GasContainerState:
        """Fetch pressure, temperature, mass and the destroyed flag."""
        endpoint = const.ENDPOINT_GET_STATE
        body = await self._require_transport().get_json(endpoint)
        return _parse(GasContainerState, endpoint, body)

    async def add_mass(self, amount: float) -> MassAdjustmentResponse:
        """Ask the server to add *amount* of gas."""
        return await self._adjust(const.ENDPOINT_ADD_MASS, amount)

    async def remove_mass(self, amount: float) -> MassAdjustmentResponse:
        """Ask the server to remove *amount* of gas."""
        return await self._adjust(const.ENDPOINT_REMOVE_MASS, amount)

    async def is_destroyed(self) -> bool:
        endpoint = const.ENDPOINT_IS_DESTROYED
        body = await self._require_transport().get_json(endpoint)
        return _parse(GasContainerState, endpoint, body).is_destroyed

    async def _adjust(self, endpoint: str, amount: float) -> MassAdjustmentResponse:
        request = MassRequest(amount=amount)
        body = await self._require_transport().post_json(endpoint, request.to_wire())
        return _parse(MassAdjustmentResponse, endpoint, body)
