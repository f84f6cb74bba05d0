"""Per-property diffing of incoming updates against cached entities.

The differ only mutates entity state. It never notifies observers: whether
a change is worth a notification (and which one) depends on store context,
such as whether the service is the active one.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from pynetstate._constants import PROP_IPCONFIG
from pynetstate.exceptions import PropertyValueError
from pynetstate.models import ManagedState, NetworkState, is_property_value, validate_property, values_equal

_logger = logging.getLogger(__name__)

_MISSING = object()

IpConfigRequest = Callable[[str, str], None]
"""Callback ``(service_path, ip_config_path)`` that fetches an IP configuration."""


class PropertyDiffer:
    """Apply single key/value pairs and report observable changes.

    Parameters
    ----------
    on_ip_config
        Called when a service reports its ``IPConfig`` reference. The resolved
        address comes back later through the store's IP address update path.
        When ``None`` the reference is ignored.
    """

    def __init__(self, *, on_ip_config: IpConfigRequest | None = None) -> None:
        self._on_ip_config = on_ip_config

    def apply(self, entity: ManagedState, key: Any, value: Any) -> bool:
        """Apply ``key = value`` to *entity* and return whether it changed.

        Malformed keys and values are skipped (logged, ``False``), so one bad
        entry never rejects the rest of a property set.
        """
        if not isinstance(key, str) or not key:
            _logger.warning("Ignoring malformed property key %r for %s", key, entity.path)
            return False

        if key == PROP_IPCONFIG and isinstance(entity, NetworkState):
            self._handle_ip_config(entity, value)
            return False

        if not is_property_value(value):
            _logger.warning(
                "Ignoring property %s for %s: unsupported value type %s",
                key,
                entity.path,
                type(value).__name__,
            )
            return False

        expected = entity.EXPECTED_TYPES.get(key)
        if expected is not None:
            try:
                validate_property(key, expected, value)
            except PropertyValueError as exc:
                _logger.warning("Ignoring property for %s: %s", entity.path, exc)
                return False

        current = entity.properties.get(key, _MISSING)
        if current is not _MISSING and values_equal(current, value):
            return False

        entity.properties[key] = copy.deepcopy(value)
        return True

    def _handle_ip_config(self, network: NetworkState, value: Any) -> None:
        if self._on_ip_config is None:
            return
        if not isinstance(value, str) or not value.strip():
            _logger.warning("Ignoring malformed %s reference for %s: %r", PROP_IPCONFIG, network.path, value)
            return
        self._on_ip_config(network.path, value)
