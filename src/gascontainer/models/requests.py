"""Mass adjustment request and response payloads."""

from __future__ import annotations

from pydantic import Field

from gascontainer.models._base import GasBaseModel


class MassRequest(GasBaseModel):
    """Amount of gas to add or remove.

    Any finite amount is accepted; the container's pressure gate is the
    only authority on whether an adjustment happens.
    NaN and infinities are rejected.
    """

    amount: float = Field(allow_inf_nan=False)


class MassAdjustmentResponse(GasBaseModel):
    """Reply to ``AddMass``/``RemoveMass``.

    ``success`` is ``True`` while the container is intact, even when the
    adjustment itself was rejected; ``message`` carries the outcome.
    """

    success: bool
    message: str
