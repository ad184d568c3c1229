"""Polling actors that feed gas into, or bleed gas out of, a remote container.

Each actor polls the container state every ``poll_interval`` seconds and,
when its own local pressure check passes, asks the server for a small random
adjustment. Server-side rejections are expected and only logged. Any
communication failure is logged and retried after ``retry_backoff`` seconds.
"""

from __future__ import annotations

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Protocol

from gascontainer import _constants as const
from gascontainer.config import ClientConfig
from gascontainer.exceptions import GasError
from gascontainer.models import GasContainerState, MassAdjustmentResponse

_logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class ContainerApi(Protocol):
    async def get_container_state(self) -> GasContainerState:
        ...

    async def add_mass(self, amount: float) -> MassAdjustmentResponse:
        ...

    async def remove_mass(self, amount: float) -> MassAdjustmentResponse:
        ...


class PollingActor(ABC):
    """Base polling loop; subclasses decide when and how to adjust mass."""

    name = "actor"

    def __init__(
        self,
        client: ContainerApi,
        config: ClientConfig | None = None,
        *,
        rng: random.Random | None = None,
        sleep: Sleep = asyncio.sleep,
        threshold: float = const.ACTOR_PRESSURE_THRESHOLD,
    ) -> None:
        self._client = client
        self._config = config or ClientConfig()
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._sleep = sleep
        self._threshold = threshold

    @abstractmethod
    def should_adjust(self, pressure: float) -> bool:
        """Local pressure check deciding whether to send a request."""

    @abstractmethod
    async def adjust(self, amount: float) -> MassAdjustmentResponse:
        """Send the adjustment request for *amount*."""

    def _next_amount(self) -> float:
        return float(self._rng.randint(const.ACTOR_MIN_AMOUNT, const.ACTOR_MAX_AMOUNT))

    async def poll_once(self) -> bool:
        """Run one cycle. Returns ``False`` once the container is destroyed."""
        state = await self._client.get_container_state()
        _logger.info("[%s] Current pressure: %s", self.name, state.pressure)

        if state.is_destroyed:
            _logger.info("[%s] The container has been destroyed. Stopping updates.", self.name)
            return False

        if self.should_adjust(state.pressure):
            amount = self._next_amount()
            response = await self.adjust(amount)
            _logger.info("[%s] Sent %s units of mass. Server response: %s", self.name, amount, response.message)
        else:
            _logger.info("[%s] Local pressure check failed, no request sent.", self.name)
        return True

    async def run(self, *, max_cycles: int | None = None) -> None:
        """Poll until the container is destroyed (or *max_cycles* cycles ran)."""
        _logger.info("Starting %s...", self.name)
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            cycles += 1
            try:
                if not await self.poll_once():
                    return
            except GasError:
                _logger.warning("[%s] Error communicating with server. Retrying...", self.name, exc_info=True)
                await self._sleep(self._config.retry_backoff)
                continue
            await self._sleep(self._config.poll_interval)


class MassIncreaser(PollingActor):
    """Adds gas while the observed pressure is below the threshold."""

    name = "increaser"

    def should_adjust(self, pressure: float) -> bool:
        return pressure < self._threshold

    async def adjust(self, amount: float) -> MassAdjustmentResponse:
        return await self._client.add_mass(amount)


class MassDecreaser(PollingActor):
    """Removes gas while the observed pressure is above the threshold.

    The threshold is looser than the server's removal gate, so requests
    inside the dead zone are sent and rejected.
    """

    name = "decreaser"

    def should_adjust(self, pressure: float) -> bool:
        return pressure > self._threshold

    async def adjust(self, amount: float) -> MassAdjustmentResponse:
        return await self._client.remove_mass(amount)
