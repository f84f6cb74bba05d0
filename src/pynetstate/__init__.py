"""pynetstate - Observable in-memory model of host network devices and services."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynetstate")
except PackageNotFoundError:
    __version__ = "0+local"
from pynetstate.config import NetStateConfig
from pynetstate.dispatch import LoopDispatcher
from pynetstate.exceptions import (
    InvalidatedInvariantError,
    NetStateConfigError,
    NetStateError,
    PropertyValueError,
)
from pynetstate.models import (
    ConnectionState,
    DeviceState,
    ManagedState,
    ManagedType,
    NetworkState,
    format_hardware_address,
)
from pynetstate.state.events import ManagerProperty, NetworkStateObserver, NotificationKind
from pynetstate.state.store import NetworkStateStore
from pynetstate.transport import NetworkTransport

__all__ = [
    "__version__",
    "ConnectionState",
    "DeviceState",
    "InvalidatedInvariantError",
    "LoopDispatcher",
    "ManagedState",
    "ManagedType",
    "ManagerProperty",
    "NetStateConfig",
    "NetStateConfigError",
    "NetStateError",
    "NetworkState",
    "NetworkStateObserver",
    "NetworkStateStore",
    "NetworkTransport",
    "NotificationKind",
    "PropertyValueError",
    "format_hardware_address",
]
