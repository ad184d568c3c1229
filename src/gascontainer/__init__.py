"""gascontainer - Simulated gas container served over HTTP+JSON."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pygascontainer")
except PackageNotFoundError:
    __version__ = "0+local"
from gascontainer.actors import MassDecreaser, MassIncreaser, PollingActor
from gascontainer.client import GasContainerClient
from gascontainer.config import ClientConfig, ContainerConfig, ServerConfig
from gascontainer.container import (
    ContainerSnapshot,
    DestructionCause,
    GasContainer,
    MassAdjustment,
    compute_pressure,
)
from gascontainer.exceptions import (
    GasApiError,
    GasConfigError,
    GasError,
    GasTransportError,
)
from gascontainer.models import GasContainerState, MassAdjustmentResponse, MassRequest
from gascontainer.runtime import DriftRuntime
from gascontainer.server import create_app, run_server

__all__ = [
    "__version__",
    "ClientConfig",
    "ContainerConfig",
    "ContainerSnapshot",
    "DestructionCause",
    "DriftRuntime",
    "GasApiError",
    "GasConfigError",
    "GasContainer",
    "GasContainerClient",
    "GasContainerState",
    "GasError",
    "GasTransportError",
    "MassAdjustment",
    "MassAdjustmentResponse",
    "MassDecreaser",
    "MassIncreaser",
    "MassRequest",
    "PollingActor",
    "ServerConfig",
    "compute_pressure",
    "create_app",
    "run_server",
]
