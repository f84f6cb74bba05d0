"""Routing of raw manager property dictionaries onto the store.

The network manager reports its technologies and its device and service
lists as properties of one manager object. This module splits such a
dictionary into the store's typed entry points, in notification order:
technologies first, then devices, then services.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pynetstate._constants import (
    MANAGER_AVAILABLE_TECHNOLOGIES,
    MANAGER_DEVICES,
    MANAGER_ENABLED_TECHNOLOGIES,
    MANAGER_SERVICES,
)
from pynetstate.ingestion.normalize import as_list
from pynetstate.models import ManagedType
from pynetstate.state.events import ManagerProperty

if TYPE_CHECKING:
    from pynetstate.state.store import NetworkStateStore

_logger = logging.getLogger(__name__)

_TECHNOLOGY_KEYS: tuple[tuple[str, ManagerProperty], ...] = (
    (MANAGER_AVAILABLE_TECHNOLOGIES, ManagerProperty.AVAILABLE_TECHNOLOGIES),
    (MANAGER_ENABLED_TECHNOLOGIES, ManagerProperty.ENABLED_TECHNOLOGIES),
)

_LIST_KEYS: tuple[tuple[str, ManagedType], ...] = (
    (MANAGER_DEVICES, ManagedType.DEVICE),
    (MANAGER_SERVICES, ManagedType.SERVICE),
)


def route_manager_properties(store: NetworkStateStore, properties: Mapping[str, Any]) -> None:
    """Apply every recognized key of a manager property dictionary.

    Unknown keys are ignored. A recognized key whose value is not a list is
    logged and skipped without affecting the other keys.
    """
    if not isinstance(properties, Mapping):
        _logger.warning("Malformed manager properties: %r", type(properties).__name__)
        return

    for key, manager_property in _TECHNOLOGY_KEYS:
        if key not in properties:
            continue
        values = as_list(properties[key])
        if values is None:
            _logger.warning("Manager property %s is not a list", key)
            continue
        store.apply_manager_property_update(manager_property, values)

    for key, managed_type in _LIST_KEYS:
        if key not in properties:
            continue
        paths = as_list(properties[key])
        if paths is None:
            _logger.warning("Manager property %s is not a list", key)
            continue
        store.apply_managed_list_update(managed_type, paths)
