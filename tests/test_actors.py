from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

import pytest
from aiohttp.test_utils import TestServer

from gascontainer import _constants as const
from gascontainer.actors import MassDecreaser, MassIncreaser, PollingActor
from gascontainer.client import GasContainerClient
from gascontainer.config import ClientConfig, ContainerConfig
from gascontainer.container import GasContainer
from gascontainer.exceptions import GasTransportError
from gascontainer.models import GasContainerState, MassAdjustmentResponse
from gascontainer.server import create_app


@dataclass
class FakeContainerApi:
    states: list[GasContainerState | Exception]
    reply_message: str = "ok"
    added: list[float] = field(default_factory=list)
    removed: list[float] = field(default_factory=list)

    async def get_container_state(self) -> GasContainerState:
        item = self.states.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def add_mass(self, amount: float) -> MassAdjustmentResponse:
        self.added.append(amount)
        return MassAdjustmentResponse(success=True, message=self.reply_message)

    async def remove_mass(self, amount: float) -> MassAdjustmentResponse:
        self.removed.append(amount)
        return MassAdjustmentResponse(success=True, message=self.reply_message)


@dataclass
class RecordedSleep:
    delays: list[float] = field(default_factory=list)

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _state(pressure: float, destroyed: bool = False) -> GasContainerState:
    return GasContainerState(pressure=pressure, temperature=293.0, mass=10.0, is_destroyed=destroyed)


@pytest.mark.asyncio
async def test_increaser_adds_below_threshold_and_stops_when_destroyed() -> None:
    api = FakeContainerApi(states=[_state(50.0), _state(99.9), _state(120.0), _state(210.0, destroyed=True)])
    sleep = RecordedSleep()

    await MassIncreaser(api, rng=random.Random(11), sleep=sleep).run()

    assert len(api.added) == 2
    assert all(amount in {1.0, 2.0, 3.0, 4.0} for amount in api.added)
    assert api.removed == []
    assert sleep.delays == [const.POLL_INTERVAL] * 3
    assert api.states == []


@pytest.mark.asyncio
async def test_decreaser_sends_removal_into_dead_zone(caplog: pytest.LogCaptureFixture) -> None:
    api = FakeContainerApi(
        states=[_state(130.8), _state(80.0), _state(0.0, destroyed=True)],
        reply_message=const.MSG_PRESSURE_TOO_LOW,
    )
    sleep = RecordedSleep()

    with caplog.at_level(logging.INFO, logger="gascontainer.actors"):
        await MassDecreaser(api, rng=random.Random(2), sleep=sleep).run()

    assert len(api.removed) == 1
    assert api.added == []
    assert const.MSG_PRESSURE_TOO_LOW in caplog.text
    assert "destroyed" in caplog.text


@pytest.mark.asyncio
async def test_transport_failure_backs_off_and_retries() -> None:
    api = FakeContainerApi(
        states=[
            GasTransportError("connection refused", endpoint=const.ENDPOINT_GET_STATE),
            _state(40.0),
            _state(40.0, destroyed=True),
        ]
    )
    sleep = RecordedSleep()
    config = ClientConfig(poll_interval=0.5, retry_backoff=7.0)

    await MassIncreaser(api, config, rng=random.Random(0), sleep=sleep).run()

    assert sleep.delays == [7.0, 0.5]
    assert len(api.added) == 1


@pytest.mark.asyncio
async def test_max_cycles_bounds_the_loop() -> None:
    api = FakeContainerApi(states=[_state(10.0) for _ in range(5)])
    sleep = RecordedSleep()

    await MassIncreaser(api, rng=random.Random(0), sleep=sleep).run(max_cycles=3)

    assert len(api.added) == 3
    assert len(api.states) == 2


@pytest.mark.asyncio
async def test_seeded_actor_amounts_are_reproducible() -> None:
    first = FakeContainerApi(states=[_state(10.0) for _ in range(4)])
    second = FakeContainerApi(states=[_state(10.0) for _ in range(4)])
    config = ClientConfig(seed=99)

    await MassIncreaser(first, config, sleep=RecordedSleep()).run(max_cycles=4)
    await MassIncreaser(second, config, sleep=RecordedSleep()).run(max_cycles=4)

    assert first.added == second.added


@pytest.mark.asyncio
async def test_increaser_against_live_server() -> None:
    container = GasContainer(ContainerConfig(initial_mass=5.0))
    async with TestServer(create_app(container)) as server:
        config = ClientConfig(base_url=str(server.make_url("")))
        async with GasContainerClient(config) as client:
            keep_going = await MassIncreaser(client, config, rng=random.Random(4)).poll_once()

    assert keep_going is True
    assert 6.0 <= container.mass <= 9.0


def test_actor_missing_adjust_cannot_be_constructed() -> None:
    class _CheckOnly(PollingActor):
        def should_adjust(self, pressure: float) -> bool:
            return True

    with pytest.raises(TypeError):
        _CheckOnly(FakeContainerApi(states=[]))  # type: ignore[abstract]

    with pytest.raises(TypeError):
        PollingActor(FakeContainerApi(states=[]))  # type: ignore[abstract]
