"""Network device model."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import Field

from pynetstate._constants import PROP_ADDRESS, PROP_INTERFACE, PROP_NAME, PROP_POWERED, PROP_SCANNING, PROP_TYPE
from pynetstate.models._base import ManagedState, ManagedType


def format_hardware_address(address: str) -> str:
    """Insert a colon between every pair of hex digits.

    ``"AABBCCDDEEFF"`` becomes ``"AA:BB:CC:DD:EE:FF"``. Addresses with an odd
    number of characters cannot be split into octets and are returned as-is.
    """
    if len(address) % 2 != 0:
        return address
    return ":".join(address[i : i + 2] for i in range(0, len(address), 2))


class DeviceState(ManagedState):
    """A network interface (wifi adapter, ethernet port, modem...)."""

    EXPECTED_TYPES: ClassVar[dict[str, Any]] = {
        PROP_NAME: str,
        PROP_TYPE: str,
        PROP_ADDRESS: str,
        PROP_POWERED: bool,
        PROP_SCANNING: bool,
        PROP_INTERFACE: str,
    }

    managed_type: Literal[ManagedType.DEVICE] = Field(default=ManagedType.DEVICE, frozen=True)

    @property
    def mac_address(self) -> str:
        """Hardware address exactly as reported, without separators."""
        return self._str_property(PROP_ADDRESS)

    @property
    def powered(self) -> bool:
        return self.properties.get(PROP_POWERED) is True

    @property
    def scanning(self) -> bool:
        return self.properties.get(PROP_SCANNING) is True

    @property
    def interface(self) -> str:
        return self._str_property(PROP_INTERFACE)
