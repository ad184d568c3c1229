"""Server, container and client configuration for gascontainer."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from gascontainer import _constants as const
from gascontainer.exceptions import GasConfigError

T = TypeVar("T")


def _env_value(env: Mapping[str, str], key: str, parse: Callable[[str], T]) -> T | None:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return None
    try:
        return parse(raw.strip())
    except ValueError as exc:
        raise GasConfigError(f"{key} has an invalid value: {raw!r}") from exc


def _collect(
    env: Mapping[str, str],
    mapping: Mapping[str, tuple[str, Callable[[str], Any]]],
    overrides: Mapping[str, Any],
) -> dict[str, Any]:
    """Read ``{ENV_KEY: (field, parser)}`` from *env*, skipping overridden fields."""
    kwargs: dict[str, Any] = {}
    for env_key, (field_name, parse) in mapping.items():
        if field_name in overrides:
            continue
        value = _env_value(env, env_key, parse)
        if value is not None:
            kwargs[field_name] = value
    return kwargs


@dataclasses.dataclass(frozen=True)
class ContainerConfig:
    """Simulation parameters for a single gas container.

    Parameters
    ----------
    initial_temperature : float
        Temperature in kelvin when the container is created.
    initial_mass : float
        Gas mass when the container is created.
    pressure_limit : float
        Mass may only be added while pressure is below this value.
    upper_pressure_limit : float
        Mass may only be removed while pressure is above this value.
    explosion_limit : float
        The container is destroyed once pressure rises above this value.
    implosion_limit : float
        The container is destroyed once pressure falls below this value.
    max_temperature_delta : int
        Each tick changes the temperature by a random integer in
        ``[-max_temperature_delta, +max_temperature_delta]``.
    tick_interval : float
        Seconds the drift runtime sleeps between ticks.
    seed : int or None
        Seed for the drift random source. ``None`` seeds from the OS.
    """

    initial_temperature: float = const.INITIAL_TEMPERATURE
    initial_mass: float = const.INITIAL_MASS
    pressure_limit: float = const.PRESSURE_LIMIT
    upper_pressure_limit: float = const.UPPER_PRESSURE_LIMIT
    explosion_limit: float = const.EXPLOSION_LIMIT
    implosion_limit: float = const.IMPLOSION_LIMIT
    max_temperature_delta: int = const.MAX_TEMPERATURE_DELTA
    tick_interval: float = const.TICK_INTERVAL
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.implosion_limit >= self.explosion_limit:
            raise GasConfigError("implosion_limit must be below explosion_limit")
        if self.max_temperature_delta < 0:
            raise GasConfigError("max_temperature_delta must not be negative")
        if self.tick_interval < 0:
            raise GasConfigError("tick_interval must not be negative")

    @classmethod
    def from_env(cls, **overrides: Any) -> ContainerConfig:
        """Create configuration from ``GAS_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        _ENV_CONFIG_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "GAS_INITIAL_TEMPERATURE": ("initial_temperature", float),
            "GAS_INITIAL_MASS": ("initial_mass", float),
            "GAS_PRESSURE_LIMIT": ("pressure_limit", float),
            "GAS_UPPER_PRESSURE_LIMIT": ("upper_pressure_limit", float),
            "GAS_EXPLOSION_LIMIT": ("explosion_limit", float),
            "GAS_IMPLOSION_LIMIT": ("implosion_limit", float),
            "GAS_MAX_TEMPERATURE_DELTA": ("max_temperature_delta", int),
            "GAS_TICK_INTERVAL": ("tick_interval", float),
            "GAS_DRIFT_SEED": ("seed", int),
        }
        config_kwargs = _collect(os.environ, _ENV_CONFIG_MAP, overrides)
        config_kwargs.update(overrides)
        return cls(**config_kwargs)


@dataclasses.dataclass(frozen=True)
class ServerConfig:
    """Listener settings plus the container it serves."""

    host: str = const.DEFAULT_HOST
    port: int = const.DEFAULT_PORT
    container: ContainerConfig = dataclasses.field(default_factory=ContainerConfig)

    @classmethod
    def from_env(cls, **overrides: Any) -> ServerConfig:
        """Create configuration from ``GAS_HOST``/``GAS_PORT`` and the container variables."""
        container_overrides = overrides.pop("container", None)
        if isinstance(container_overrides, ContainerConfig):
            container = container_overrides
        else:
            container = ContainerConfig.from_env(**(container_overrides or {}))

        _ENV_CONFIG_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "GAS_HOST": ("host", str),
            "GAS_PORT": ("port", int),
        }
        config_kwargs: dict[str, Any] = {"container": container}
        config_kwargs.update(_collect(os.environ, _ENV_CONFIG_MAP, overrides))
        config_kwargs.update(overrides)
        return cls(**config_kwargs)


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Client and polling actor configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the container server.
    poll_interval : float
        Seconds a polling actor waits between cycles.
    retry_backoff : float
        Seconds a polling actor waits after a communication failure.
    request_timeout : float
        Total timeout in seconds for a single HTTP request.
    seed : int or None
        Seed for the actor's random amount source.
    """

    base_url: str = const.DEFAULT_BASE_URL
    poll_interval: float = const.POLL_INTERVAL
    retry_backoff: float = const.RETRY_BACKOFF
    request_timeout: float = const.REQUEST_TIMEOUT
    seed: int | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Create configuration from ``GAS_*`` environment variables."""
        _ENV_CONFIG_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "GAS_BASE_URL": ("base_url", str),
            "GAS_POLL_INTERVAL": ("poll_interval", float),
            "GAS_RETRY_BACKOFF": ("retry_backoff", float),
            "GAS_REQUEST_TIMEOUT": ("request_timeout", float),
            "GAS_ACTOR_SEED": ("seed", int),
        }
        config_kwargs = _collect(os.environ, _ENV_CONFIG_MAP, overrides)
        config_kwargs.update(overrides)
        return cls(**config_kwargs)
