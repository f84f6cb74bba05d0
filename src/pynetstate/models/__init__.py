"""Typed models for devices and services mirrored from the network manager."""

from __future__ import annotations

from pynetstate.models._base import (
    ManagedState,
    ManagedType,
    PropertyValue,
    is_property_value,
    validate_property,
    values_equal,
)
from pynetstate.models.device import DeviceState, format_hardware_address
from pynetstate.models.network import ConnectionState, NetworkState


def create_managed_state(managed_type: ManagedType, path: str) -> ManagedState:
    """Create an empty entity of *managed_type* for *path*."""
    if managed_type == ManagedType.DEVICE:
        return DeviceState(path=path)
    return NetworkState(path=path)


__all__ = [
    "ConnectionState",
    "DeviceState",
    "ManagedState",
    "ManagedType",
    "NetworkState",
    "PropertyValue",
    "create_managed_state",
    "format_hardware_address",
    "is_property_value",
    "validate_property",
    "values_equal",
]
