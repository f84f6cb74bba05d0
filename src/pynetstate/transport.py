"""Interface the state store needs from the network-manager transport.

The transport talks to the system network-management service. Its requests
are fire-and-forget: results come back later through the store's
``apply_*`` entry points, always on the thread that owns the store (see
:class:`pynetstate.dispatch.LoopDispatcher` for transports that receive
responses elsewhere).
"""

from __future__ import annotations

from typing import Protocol

from pynetstate.models import ManagedType


class NetworkTransport(Protocol):
    def request_managed_list(self, managed_type: ManagedType) -> None:
        """Ask for the ordered path list of *managed_type*.

        Delivered via ``apply_managed_list_update``.
        """
        ...

    def request_properties(self, managed_type: ManagedType, path: str) -> None:
        """Ask for the full property set of one entity.

        Delivered via ``apply_property_set_update``.
        """
        ...

    def request_ip_config(self, service_path: str, ip_config_path: str) -> None:
        """Resolve the address held by an IP configuration object.

        Delivered via ``apply_ip_address_update``.
        """
        ...

    def set_technology_enabled(self, technology: str, enabled: bool) -> None: ...

    def request_scan(self) -> None: ...

    def is_observing(self, path: str) -> bool:
        """Whether live property changes for *path* are being pushed."""
        ...
