"""Thread-safe gas container state machine.

The container owns temperature, mass and the destroyed latch. Pressure is
derived on every read as ``mass * temperature / 22.4``. All state lives
behind a single :class:`threading.Lock`; the drift runtime, request
handlers and inspection calls all compete for it and none of them holds it
across a sleep or network I/O.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from enum import StrEnum

from gascontainer import _constants as const
from gascontainer.config import ContainerConfig

_logger = logging.getLogger(__name__)


class DestructionCause(StrEnum):
    IMPLODED = "imploded"
    EXPLODED = "exploded"


@dataclass(frozen=True, slots=True)
class MassAdjustment:
    """Outcome of a mass mutation.

    ``applied`` tells whether the mass actually changed; ``message`` is the
    human-readable reason returned to callers either way.
    """

    applied: bool
    message: str


@dataclass(frozen=True, slots=True)
class ContainerSnapshot:
    """All observable fields read in one critical section."""

    pressure: float
    temperature: float
    mass: float
    destroyed: bool


def compute_pressure(mass: float, temperature: float) -> float:
    """Simplified gas pressure: ``(mass * temperature) / 22.4``."""
    return (mass * temperature) / const.GAS_CONSTANT


class GasContainer:
    """A sealed gas container whose pressure drifts and can be adjusted.

    Usage::

        container = GasContainer(ContainerConfig(), rng=random.Random(42))
        container.tick()
        outcome = container.increase_mass(2.0)
    """

    def __init__(
        self,
        config: ContainerConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or ContainerConfig()
        self._rng = rng if rng is not None else random.Random(self._config.seed)
        self._lock = threading.Lock()
        self._temperature = float(self._config.initial_temperature)
        self._mass = float(self._config.initial_mass)
        self._destroyed = False
        self._cause: DestructionCause | None = None

    @property
    def config(self) -> ContainerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def pressure(self) -> float:
        with self._lock:
            return self._pressure()

    @property
    def temperature(self) -> float:
        with self._lock:
            return self._temperature

    @property
    def mass(self) -> float:
        with self._lock:
            return self._mass

    @property
    def is_destroyed(self) -> bool:
        with self._lock:
            return self._destroyed

    @property
    def cause(self) -> DestructionCause | None:
        """Why the container was destroyed, or ``None`` while intact."""
        with self._lock:
            return self._cause

    def snapshot(self) -> ContainerSnapshot:
        with self._lock:
            return ContainerSnapshot(
                pressure=self._pressure(),
                temperature=self._temperature,
                mass=self._mass,
                destroyed=self._destroyed,
            )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def increase_mass(self, amount: float) -> MassAdjustment:
        """Add *amount* of gas while pressure is below the add limit."""
        with self._lock:
            if not self._destroyed and self._pressure() < self._config.pressure_limit:
                self._mass += amount
                _logger.info("Mass increased by %s. New mass: %s", amount, self._mass)
                return MassAdjustment(applied=True, message=const.MSG_MASS_INCREASED)
            _logger.debug("Rejected adding %s mass at pressure %.2f", amount, self._pressure())
            return MassAdjustment(applied=False, message=const.MSG_PRESSURE_TOO_HIGH)

    def decrease_mass(self, amount: float) -> MassAdjustment:
        """Remove *amount* of gas while pressure is above the removal limit."""
        with self._lock:
            if not self._destroyed and self._pressure() > self._config.upper_pressure_limit:
                self._mass -= amount
                _logger.info("Mass decreased by %s. New mass: %s", amount, self._mass)
                return MassAdjustment(applied=True, message=const.MSG_MASS_DECREASED)
            _logger.debug("Rejected removing %s mass at pressure %.2f", amount, self._pressure())
            return MassAdjustment(applied=False, message=const.MSG_PRESSURE_TOO_LOW)

    def tick(self) -> int | None:
        """Apply one random temperature drift and check the pressure limits.

        Returns the applied delta in kelvin, or ``None`` when the container
        is already destroyed and nothing changed.
        """
        with self._lock:
            if self._destroyed:
                return None
            limit = self._config.max_temperature_delta
            delta = self._rng.randint(-limit, limit)
            self._temperature += delta
            _logger.info(
                "Temperature changed by %sK. New temperature: %sK",
                delta,
                self._temperature,
            )
            self._check_pressure_limits()
            return delta

    # ------------------------------------------------------------------
    # Internal helpers (caller holds the lock)
    # ------------------------------------------------------------------

    def _pressure(self) -> float:
        return compute_pressure(self._mass, self._temperature)

    def _check_pressure_limits(self) -> None:
        pressure = self._pressure()
        if pressure < self._config.implosion_limit:
            self._latch(DestructionCause.IMPLODED, pressure)
        elif pressure > self._config.explosion_limit:
            self._latch(DestructionCause.EXPLODED, pressure)

    def _latch(self, cause: DestructionCause, pressure: float) -> None:
        self._destroyed = True
        self._cause = cause
        _logger.warning("Container %s! Pressure: %.2f", cause, pressure)
