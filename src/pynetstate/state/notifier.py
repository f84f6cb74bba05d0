"""Synchronous observer fan-out."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pynetstate.models import NetworkState
from pynetstate.state.events import NetworkStateObserver, NotificationKind

_logger = logging.getLogger(__name__)


class ObserverNotifier:
    """Delivers notifications to registered observers in registration order.

    A failing observer is logged and skipped; the remaining observers still
    receive the notification.
    """

    def __init__(self) -> None:
        self._observers: list[NetworkStateObserver] = []

    def add_observer(self, observer: NetworkStateObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: NetworkStateObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def clear(self) -> None:
        self._observers.clear()

    def has_observer(self, observer: NetworkStateObserver) -> bool:
        return observer in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def _broadcast(self, kind: NotificationKind, *args: Any) -> None:
        if not self._observers:
            return
        _logger.debug("Notify %s observers=%d", kind, len(self._observers))
        # Snapshot so an observer may unregister itself from inside its callback.
        for observer in tuple(self._observers):
            callback = getattr(observer, kind.value, None)
            if callback is None:
                continue
            try:
                callback(*args)
            except Exception:
                _logger.debug("Observer %r failed handling %s", observer, kind, exc_info=True)

    def manager_changed(self) -> None:
        self._broadcast(NotificationKind.MANAGER_CHANGED)

    def device_list_changed(self) -> None:
        self._broadcast(NotificationKind.DEVICE_LIST_CHANGED)

    def network_list_changed(self, networks: Sequence[NetworkState]) -> None:
        self._broadcast(NotificationKind.NETWORK_LIST_CHANGED, networks)

    def active_network_changed(self, network: NetworkState | None) -> None:
        self._broadcast(NotificationKind.ACTIVE_NETWORK_CHANGED, network)

    def network_service_changed(self, network: NetworkState) -> None:
        self._broadcast(NotificationKind.NETWORK_SERVICE_CHANGED, network)

    def active_network_state_changed(self, network: NetworkState) -> None:
        self._broadcast(NotificationKind.ACTIVE_NETWORK_STATE_CHANGED, network)
