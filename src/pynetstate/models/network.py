"""Network service model.

A service is a connectable network (a wifi SSID, an ethernet link, a
cellular carrier...). Connection state values follow the network manager's
``State`` property.
"""

from __future__ import annotations

import enum
from typing import Any, ClassVar, Literal

from pydantic import Field

from pynetstate._constants import (
    PROP_CONNECTABLE,
    PROP_DEVICE,
    PROP_ERROR,
    PROP_IPCONFIG,
    PROP_NAME,
    PROP_SECURITY,
    PROP_STATE,
    PROP_STRENGTH,
    PROP_TYPE,
)
from pynetstate.models._base import ManagedState, ManagedType

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class ConnectionState(enum.StrEnum):
    """Service connection state.

    Values without a mapped member resolve to ``UNKNOWN`` instead of raising
    ``ValueError``, so a newer network manager cannot break parsing.
    """

    UNKNOWN = "unknown"
    IDLE = "idle"
    CARRIER = "carrier"
    ASSOCIATION = "association"
    CONFIGURATION = "configuration"
    READY = "ready"
    PORTAL = "portal"
    ONLINE = "online"
    DISCONNECT = "disconnect"
    FAILURE = "failure"
    ACTIVATION_FAILURE = "activation-failure"

    @classmethod
    def _missing_(cls, value: object) -> ConnectionState:
        return cls.UNKNOWN

    @property
    def is_connected(self) -> bool:
        return self in _CONNECTED_STATES

    @property
    def is_connecting(self) -> bool:
        return self in _CONNECTING_STATES


_CONNECTED_STATES = frozenset({ConnectionState.READY, ConnectionState.PORTAL, ConnectionState.ONLINE})
_CONNECTING_STATES = frozenset(
    {ConnectionState.ASSOCIATION, ConnectionState.CONFIGURATION, ConnectionState.CARRIER}
)


# ------------------------------------------------------------------
# Model
# ------------------------------------------------------------------


class NetworkState(ManagedState):
    """A connectable network service.

    ``ip_address`` is not part of the service's own property payload. It is
    resolved from the ``IPConfig`` object the service references and written
    through the store's IP address update path.
    """

    EXPECTED_TYPES: ClassVar[dict[str, Any]] = {
        PROP_NAME: str,
        PROP_TYPE: str,
        PROP_STATE: str,
        PROP_SECURITY: str,
        PROP_STRENGTH: int,
        PROP_DEVICE: str,
        PROP_ERROR: str,
        PROP_CONNECTABLE: bool,
        PROP_IPCONFIG: str,
    }

    managed_type: Literal[ManagedType.SERVICE] = Field(default=ManagedType.SERVICE, frozen=True)
    ip_address: str = ""

    @property
    def connection_state(self) -> ConnectionState:
        return ConnectionState(self._str_property(PROP_STATE))

    def is_connected(self) -> bool:
        return self.connection_state.is_connected

    def is_connecting(self) -> bool:
        return self.connection_state.is_connecting

    @property
    def security(self) -> str:
        return self._str_property(PROP_SECURITY)

    @property
    def signal_strength(self) -> int:
        value = self.properties.get(PROP_STRENGTH)
        return value if isinstance(value, int) and not isinstance(value, bool) else 0

    @property
    def device_path(self) -> str:
        """Path of the device this service runs on."""
        return self._str_property(PROP_DEVICE)

    @property
    def error(self) -> str:
        return self._str_property(PROP_ERROR)

    @property
    def connectable(self) -> bool:
        return self.properties.get(PROP_CONNECTABLE) is True
