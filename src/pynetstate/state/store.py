"""Authoritative in-memory model of network devices and services.

This is the only component allowed to mutate device and service state. All
``apply_*`` entry points and all observer notifications run on the single
thread that owns the store; the store takes no locks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pynetstate._constants import PROP_STATE, TYPE_ETHERNET
from pynetstate._redact import redact_for_log
from pynetstate.config import NetStateConfig
from pynetstate.exceptions import InvalidatedInvariantError
from pynetstate.ingestion.manager import route_manager_properties
from pynetstate.ingestion.normalize import as_list, normalize_paths, normalize_technologies
from pynetstate.models import DeviceState, ManagedState, ManagedType, NetworkState, format_hardware_address
from pynetstate.state.differ import PropertyDiffer
from pynetstate.state.events import ManagerProperty, NetworkStateObserver
from pynetstate.state.notifier import ObserverNotifier
from pynetstate.state.table import EntityTable, is_priority_ordered, service_priority
from pynetstate.transport import NetworkTransport

_logger = logging.getLogger(__name__)

_FetchKey = tuple[ManagedType, str]


class NetworkStateStore:
    """Mirror of the network manager's devices, services and technologies.

    Usage::

        store = NetworkStateStore(transport)
        store.add_observer(observer)
        store.init()

    The transport feeds results back through the ``apply_*`` methods. Query
    methods never raise: an unknown device or service is ``None``.
    """

    def __init__(self, transport: NetworkTransport, *, config: NetStateConfig | None = None) -> None:
        self._transport = transport
        self._config = config or NetStateConfig()
        self._notifier = ObserverNotifier()
        self._differ = PropertyDiffer(on_ip_config=self._request_ip_config if self._config.request_ip_config else None)
        self._devices = EntityTable(ManagedType.DEVICE)
        self._services = EntityTable(ManagedType.SERVICE)
        self._available_technologies: set[str] = set()
        self._enabled_technologies: set[str] = set()
        self._active_service_path = ""
        self._pending_fetches: set[_FetchKey] = set()
        # Fetches whose entity was removed while the request was in flight.
        self._abandoned_fetches: set[_FetchKey] = set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Request the initial device and service lists."""
        for managed_type in (ManagedType.DEVICE, ManagedType.SERVICE):
            self._transport.request_managed_list(managed_type)

    def shutdown(self) -> None:
        """Drop observers and all cached state."""
        self._notifier.clear()
        self._devices.clear()
        self._services.clear()
        self._available_technologies.clear()
        self._enabled_technologies.clear()
        self._active_service_path = ""
        self._pending_fetches.clear()
        self._abandoned_fetches.clear()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: NetworkStateObserver) -> None:
        self._notifier.add_observer(observer)

    def remove_observer(self, observer: NetworkStateObserver) -> None:
        self._notifier.remove_observer(observer)

    # ------------------------------------------------------------------
    # Technologies
    # ------------------------------------------------------------------

    def technology_available(self, technology: str) -> bool:
        return technology in self._available_technologies

    def technology_enabled(self, technology: str) -> bool:
        return technology in self._enabled_technologies

    def set_technology_enabled(self, technology: str, enabled: bool) -> None:
        """Ask the network manager to enable or disable *technology*.

        The cached enabled set only changes once the manager reports it.
        """
        self._transport.set_technology_enabled(technology, enabled)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_device(self, path: str) -> DeviceState | None:
        device = self._devices.lookup(path)
        return device if isinstance(device, DeviceState) else None

    def get_device_by_type(self, type_: str) -> DeviceState | None:
        device = self._devices.lookup_by_type(type_)
        return device if isinstance(device, DeviceState) else None

    def get_service(self, path: str) -> NetworkState | None:
        network = self._services.lookup(path)
        return network if isinstance(network, NetworkState) else None

    @property
    def active_service_path(self) -> str:
        """Path of the active service as of the last service list update."""
        return self._active_service_path

    def active_service(self) -> NetworkState | None:
        """First service in priority order, if it is connected."""
        networks = self._networks()
        if not networks:
            return None
        return networks[0] if networks[0].is_connected() else None

    def connected_service_by_type(self, type_: str) -> NetworkState | None:
        for network in self._networks():
            if not network.is_connected():
                break  # Connected services are listed first.
            if network.type == type_:
                return network
        return None

    def connecting_service_by_type(self, type_: str) -> NetworkState | None:
        """First connecting service of *type_*.

        An empty *type_* matches a connecting service of any type except
        ethernet.
        """
        for network in self._networks():
            if network.is_connected():
                continue
            if not network.is_connecting():
                break  # Connected and connecting services are listed first.
            if network.type == type_ or (not type_ and network.type != TYPE_ETHERNET):
                return network
        return None

    def hardware_address_for_type(self, type_: str) -> str:
        """Upper-cased hardware address of the device behind the connected *type_* service.

        Empty when there is no such service or device.
        """
        network = self.connected_service_by_type(type_)
        if network is None:
            return ""
        device = self.get_device(network.device_path)
        if device is None:
            return ""
        return device.mac_address.upper()

    def formatted_hardware_address_for_type(self, type_: str) -> str:
        return format_hardware_address(self.hardware_address_for_type(type_))

    def list_services(self) -> list[NetworkState]:
        """Snapshot of all services in priority order.

        Also asks the transport for a best-effort scan so the next list update
        is fresh.
        """
        if self._config.scan_on_list:
            self._transport.request_scan()
        return self._networks()

    def device_list(self) -> list[DeviceState]:
        return [device for device in self._devices if isinstance(device, DeviceState)]

    def is_fetch_pending(self, managed_type: ManagedType, path: str) -> bool:
        return (ManagedType(managed_type), path) in self._pending_fetches

    # ------------------------------------------------------------------
    # Update entry points (called by the transport)
    # ------------------------------------------------------------------

    def apply_managed_list_update(self, managed_type: ManagedType, paths: Iterable[Any]) -> None:
        """Reconcile the *managed_type* table against an authoritative path list."""
        managed_type = ManagedType(managed_type)
        entries = as_list(paths)
        if entries is None:
            _logger.warning("Malformed %s list ignored: %r", managed_type, type(paths).__name__)
            return
        table = self._table(managed_type)
        before = table.paths()
        # Responses for entities removed in an earlier cycle are no longer expected.
        self._abandoned_fetches = {key for key in self._abandoned_fetches if key[0] != managed_type}

        result = table.reconcile(normalize_paths(entries), self._transport.is_observing)
        for entity in result.removed:
            self._forget_fetch(managed_type, entity.path)
        for entry in result.entries:
            if entry.request_properties:
                self._request_properties(managed_type, entry.entity.path)

        if managed_type == ManagedType.DEVICE:
            if result.changed:
                self._notifier.device_list_changed()
            return

        table.reorder(service_priority)
        self._check_service_order()
        list_changed = table.paths() != before

        active = self.active_service()
        active_path = active.path if active is not None else ""
        active_changed = active_path != self._active_service_path
        self._active_service_path = active_path

        if list_changed:
            self._notifier.network_list_changed(self._networks())
        if active_changed:
            _logger.debug("Active service changed to %r", active_path)
            self._notifier.active_network_changed(active)

    def apply_property_set_update(
        self,
        managed_type: ManagedType,
        path: str,
        properties: Mapping[str, Any],
    ) -> None:
        """Apply the full property set fetched for one entity."""
        managed_type = ManagedType(managed_type)
        key = (managed_type, path)
        self._pending_fetches.discard(key)
        stale = key in self._abandoned_fetches
        self._abandoned_fetches.discard(key)

        entity = self._table(managed_type).lookup(path)
        if entity is None:
            if stale:
                _logger.debug("Dropping property set for removed %s %s", managed_type, path)
            else:
                _logger.warning("Property set for unknown %s %s ignored", managed_type, path)
            return
        if not isinstance(properties, Mapping):
            _logger.warning("Malformed property set for %s %s: %r", managed_type, path, type(properties).__name__)
            return
        if self._config.log_property_payloads:
            _logger.debug("Property set for %s %s: %s", managed_type, path, redact_for_log(properties))

        changed_keys = [k for k, value in properties.items() if self._differ.apply(entity, k, value)]
        self._notify_entity_changed(entity, changed_keys)

    def apply_single_property_update(self, managed_type: ManagedType, path: str, key: str, value: Any) -> None:
        """Apply one pushed property change for an observed entity."""
        managed_type = ManagedType(managed_type)
        entity = self._table(managed_type).lookup(path)
        if entity is None:
            _logger.warning("Property %s for unknown %s %s ignored", key, managed_type, path)
            return
        if self._config.log_property_payloads:
            _logger.debug("Property for %s %s: %s", managed_type, path, redact_for_log({key: value}))

        changed_keys = [key] if self._differ.apply(entity, key, value) else []
        self._notify_entity_changed(entity, changed_keys)

    def apply_ip_address_update(self, service_path: str, ip_address: str) -> None:
        """Set the address resolved from a service's IP configuration.

        Always counts as a change.
        """
        network = self.get_service(service_path)
        if network is None:
            _logger.debug("Dropping IP address for removed service %s", service_path)
            return
        if not isinstance(ip_address, str):
            _logger.warning("Malformed IP address for %s: %r", service_path, type(ip_address).__name__)
            return
        network.ip_address = ip_address
        self._notifier.network_service_changed(network)

    def apply_manager_property_update(self, manager_property: ManagerProperty, values: Iterable[Any]) -> None:
        """Replace the available or enabled technology set wholesale."""
        manager_property = ManagerProperty(manager_property)
        entries = as_list(values)
        if entries is None:
            _logger.warning("Malformed %s ignored: %r", manager_property, type(values).__name__)
            return
        technologies = normalize_technologies(entries)
        if manager_property == ManagerProperty.AVAILABLE_TECHNOLOGIES:
            self._available_technologies = technologies
        else:
            self._enabled_technologies = technologies
        _logger.debug("%s: %s", manager_property, sorted(technologies))
        self._notifier.manager_changed()

    def apply_manager_properties(self, properties: Mapping[str, Any]) -> None:
        """Apply a raw manager property dictionary (technologies and lists)."""
        route_manager_properties(self, properties)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _table(self, managed_type: ManagedType) -> EntityTable:
        if managed_type == ManagedType.DEVICE:
            return self._devices
        return self._services

    def _networks(self) -> list[NetworkState]:
        return [network for network in self._services if isinstance(network, NetworkState)]

    def _request_properties(self, managed_type: ManagedType, path: str) -> None:
        key = (managed_type, path)
        if key in self._pending_fetches:
            _logger.debug("Property fetch already pending for %s %s", managed_type, path)
            return
        self._pending_fetches.add(key)
        self._abandoned_fetches.discard(key)
        _logger.debug("Requesting properties for %s %s", managed_type, path)
        self._transport.request_properties(managed_type, path)

    def _forget_fetch(self, managed_type: ManagedType, path: str) -> None:
        key = (managed_type, path)
        if key in self._pending_fetches:
            self._pending_fetches.discard(key)
            self._abandoned_fetches.add(key)

    def _request_ip_config(self, service_path: str, ip_config_path: str) -> None:
        _logger.debug("Requesting IP config %s for %s", ip_config_path, service_path)
        self._transport.request_ip_config(service_path, ip_config_path)

    def _check_service_order(self) -> None:
        if is_priority_ordered(self._services):
            return
        message = f"Service table violates connected-first ordering: {self._services.paths()}"
        if self._config.strict_invariants:
            raise InvalidatedInvariantError(message)
        _logger.warning("%s; re-sorting", message)
        self._services.reorder(service_priority)

    def _notify_entity_changed(self, entity: ManagedState, changed_keys: list[str]) -> None:
        if not changed_keys:
            return
        if not isinstance(entity, NetworkState):
            _logger.debug("Device %s updated: %s", entity.path, changed_keys)
            return
        self._notifier.network_service_changed(entity)
        if entity.path == self._active_service_path and PROP_STATE in changed_keys:
            self._notifier.active_network_state_changed(entity)
