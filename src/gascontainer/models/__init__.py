"""Wire models for the gas container interface."""

from gascontainer.models._base import GasBaseModel
from gascontainer.models.requests import MassAdjustmentResponse, MassRequest
from gascontainer.models.state import GasContainerState

__all__ = [
    "GasBaseModel",
    "GasContainerState",
    "MassAdjustmentResponse",
    "MassRequest",
]
