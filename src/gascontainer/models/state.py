"""Container state payload."""

from __future__ import annotations

from gascontainer.models._base import GasBaseModel


class GasContainerState(GasBaseModel):
    """Observed container state.

    ``IsDestroyed`` replies reuse this model with only ``is_destroyed``
    populated; the numeric fields keep their zero defaults.
    """

    pressure: float = 0.0
    temperature: float = 0.0
    mass: float = 0.0
    is_destroyed: bool = False
