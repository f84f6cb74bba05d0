"""Thread marshalling for transports that receive responses off-loop.

The store assumes every ``apply_*`` call arrives on the thread that owns it.
A transport whose replies land on a worker thread (a D-Bus main loop, a
socket reader...) hands them to a :class:`LoopDispatcher`, which posts each
call onto the owning asyncio event loop with ``call_soon_threadsafe``.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pynetstate.models import ManagedType
from pynetstate.state.events import ManagerProperty
from pynetstate.state.store import NetworkStateStore

_logger = logging.getLogger(__name__)


class LoopDispatcher:
    """Forward transport callbacks to a store on its event loop.

    Every method is safe to call from any thread. Payloads are deep-copied as
    received, malformed or not, so the caller may reuse its buffers and the
    store still sees the original shape.
    """

    def __init__(self, store: NetworkStateStore, loop: asyncio.AbstractEventLoop) -> None:
        self._store = store
        self._loop = loop

    def managed_list(self, managed_type: ManagedType, paths: Iterable[Any]) -> None:
        self._post(self._store.apply_managed_list_update, managed_type, copy.deepcopy(paths))

    def property_set(self, managed_type: ManagedType, path: str, properties: Mapping[str, Any]) -> None:
        self._post(self._store.apply_property_set_update, managed_type, path, copy.deepcopy(properties))

    def single_property(self, managed_type: ManagedType, path: str, key: str, value: Any) -> None:
        self._post(self._store.apply_single_property_update, managed_type, path, key, value)

    def ip_address(self, service_path: str, ip_address: str) -> None:
        self._post(self._store.apply_ip_address_update, service_path, ip_address)

    def manager_property(self, manager_property: ManagerProperty, values: Iterable[Any]) -> None:
        self._post(self._store.apply_manager_property_update, manager_property, copy.deepcopy(values))

    def manager_properties(self, properties: Mapping[str, Any]) -> None:
        self._post(self._store.apply_manager_properties, copy.deepcopy(properties))

    def _post(self, fn: Callable[..., None], *args: Any) -> None:
        if self._loop.is_closed():
            _logger.debug("Event loop closed; dropping %s", getattr(fn, "__name__", fn))
            return
        self._loop.call_soon_threadsafe(fn, *args)
