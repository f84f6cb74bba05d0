"""Observer interface and notification kinds.

Observers subclass :class:`NetworkStateObserver` and override the callbacks
they care about. Every callback runs synchronously on the thread that owns
the store, after the update that triggered it has been fully applied.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence

from pynetstate.models import NetworkState


class ManagerProperty(enum.StrEnum):
    """Manager-level technology sets."""

    AVAILABLE_TECHNOLOGIES = "available_technologies"
    ENABLED_TECHNOLOGIES = "enabled_technologies"


class NotificationKind(enum.StrEnum):
    """Notifications in the order they are emitted within one update.

    Each value is the name of the matching :class:`NetworkStateObserver`
    callback.
    """

    MANAGER_CHANGED = "network_manager_changed"
    DEVICE_LIST_CHANGED = "device_list_changed"
    NETWORK_LIST_CHANGED = "network_list_changed"
    ACTIVE_NETWORK_CHANGED = "active_network_changed"
    NETWORK_SERVICE_CHANGED = "network_service_changed"
    ACTIVE_NETWORK_STATE_CHANGED = "active_network_state_changed"


class NetworkStateObserver:
    """Receives change notifications from a network state store.

    Observers may query the store from inside a callback but must not call
    any ``apply_*`` method on it.
    """

    def network_manager_changed(self) -> None:
        """The available or enabled technology sets were replaced."""

    def device_list_changed(self) -> None:
        """Devices were added, removed or reordered."""

    def network_list_changed(self, networks: Sequence[NetworkState]) -> None:
        """Services were added, removed or reordered. *networks* is in priority order."""

    def active_network_changed(self, network: NetworkState | None) -> None:
        """The active service changed. ``None`` when nothing is connected."""

    def network_service_changed(self, network: NetworkState) -> None:
        """One or more observable properties of *network* changed."""

    def active_network_state_changed(self, network: NetworkState) -> None:
        """The connection state of the active service changed."""
