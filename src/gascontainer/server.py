"""HTTP+JSON adapter exposing a :class:`GasContainer`.

Handlers are thin: parse the request model, call the container, serialize
the reply. The container's lock is never held across I/O, so handlers call
it directly from the event loop.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from typing import Any

from aiohttp import web
from pydantic import ValidationError

from gascontainer import _constants as const
from gascontainer.config import ServerConfig
from gascontainer.container import GasContainer
from gascontainer.models import GasContainerState, MassAdjustmentResponse, MassRequest
from gascontainer.runtime import DriftRuntime

_logger = logging.getLogger(__name__)

CONTAINER_KEY: web.AppKey[GasContainer] = web.AppKey("container", GasContainer)
RUNTIME_KEY: web.AppKey[DriftRuntime] = web.AppKey("runtime", DriftRuntime)


def _bad_request(reason: str) -> web.HTTPBadRequest:
    return web.HTTPBadRequest(
        text=json.dumps({"error": reason}),
        content_type="application/json",
    )


async def _read_mass_request(request: web.Request) -> MassRequest:
    try:
        body: Any = await request.json()
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError both derive from ValueError
        raise _bad_request(f"request body is not JSON: {exc}") from exc
    try:
        return MassRequest.model_validate(body)
    except ValidationError as exc:
        raise _bad_request(f"invalid MassRequest: {exc.errors(include_url=False)[0]['msg']}") from exc


class GasContainerService:
    """Request handlers bound to one container."""

    def __init__(self, container: GasContainer) -> None:
        self._container = container

    async def get_container_state(self, _request: web.Request) -> web.Response:
        snap = self._container.snapshot()
        state = GasContainerState(
            pressure=snap.pressure,
            temperature=snap.temperature,
            mass=snap.mass,
            is_destroyed=snap.destroyed,
        )
        return web.json_response(state.to_wire())

    async def add_mass(self, request: web.Request) -> web.Response:
        body = await _read_mass_request(request)
        outcome = self._container.increase_mass(body.amount)
        return self._mass_response(outcome.message)

    async def remove_mass(self, request: web.Request) -> web.Response:
        body = await _read_mass_request(request)
        outcome = self._container.decrease_mass(body.amount)
        return self._mass_response(outcome.message)

    async def is_destroyed(self, _request: web.Request) -> web.Response:
        state = GasContainerState(is_destroyed=self._container.is_destroyed)
        return web.json_response(state.to_wire())

    def _mass_response(self, message: str) -> web.Response:
        # success mirrors container health, not whether the mass changed
        reply = MassAdjustmentResponse(success=not self._container.is_destroyed, message=message)
        return web.json_response(reply.to_wire())


def create_app(container: GasContainer, *, runtime: DriftRuntime | None = None) -> web.Application:
    """Build the aiohttp application serving *container*.

    When *runtime* is given it is started on application startup and
    stopped on cleanup.
    """
    service = GasContainerService(container)
    app = web.Application()
    app[CONTAINER_KEY] = container
    app.router.add_get(const.ENDPOINT_GET_STATE, service.get_container_state)
    app.router.add_post(const.ENDPOINT_ADD_MASS, service.add_mass)
    app.router.add_post(const.ENDPOINT_REMOVE_MASS, service.remove_mass)
    app.router.add_get(const.ENDPOINT_IS_DESTROYED, service.is_destroyed)

    if runtime is not None:
        app[RUNTIME_KEY] = runtime

        async def _drift_ctx(_app: web.Application) -> AsyncIterator[None]:
            runtime.start()
            yield
            runtime.stop()

        app.cleanup_ctx.append(_drift_ctx)
    return app


def build_server_app(config: ServerConfig) -> web.Application:
    """Create a fresh container and drift runtime wired into an application."""
    container = GasContainer(config.container)
    return create_app(container, runtime=DriftRuntime(container))


def run_server(config: ServerConfig) -> None:
    """Serve until interrupted."""
    app = build_server_app(config)
    _logger.info("Server is about to start on %s:%s", config.host, config.port)
    web.run_app(app, host=config.host, port=config.port, print=None)
