#!/usr/bin/env python3
"""Replay recorded network-manager updates into a state store.

The input is a JSON list of update events. Each event is an object with an
``op`` field:

    {"op": "list", "type": "service", "paths": ["/service/1", ...]}
    {"op": "properties", "type": "service", "path": "/service/1", "properties": {...}}
    {"op": "property", "type": "service", "path": "/service/1", "key": "State", "value": "online"}
    {"op": "ip", "path": "/service/1", "address": "192.168.1.20"}
    {"op": "manager", "properties": {"AvailableTechnologies": ["wifi"], ...}}
    {"op": "observe", "paths": ["/service/1"]}

Usage
-----
    python scripts/replay_updates.py events.json
    python scripts/replay_updates.py --verbose --strict events.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pynetstate import (
    ManagedType,
    NetStateConfig,
    NetworkState,
    NetworkStateObserver,
    NetworkStateStore,
)
from pynetstate._redact import redact_for_log


class _RecordingTransport:
    """Transport that only records what the store asks for."""

    def __init__(self) -> None:
        self.observed: set[str] = set()
        self.requests: list[str] = []

    def request_managed_list(self, managed_type: ManagedType) -> None:
        self.requests.append(f"list {managed_type}")

    def request_properties(self, managed_type: ManagedType, path: str) -> None:
        self.requests.append(f"properties {managed_type} {path}")

    def request_ip_config(self, service_path: str, ip_config_path: str) -> None:
        self.requests.append(f"ipconfig {service_path} {ip_config_path}")

    def set_technology_enabled(self, technology: str, enabled: bool) -> None:
        self.requests.append(f"technology {technology} {'on' if enabled else 'off'}")

    def request_scan(self) -> None:
        self.requests.append("scan")

    def is_observing(self, path: str) -> bool:
        return path in self.observed


class _PrintingObserver(NetworkStateObserver):
    def network_manager_changed(self) -> None:
        print("  -> manager changed")

    def device_list_changed(self) -> None:
        print("  -> device list changed")

    def network_list_changed(self, networks: Sequence[NetworkState]) -> None:
        print(f"  -> network list changed: {[n.path for n in networks]}")

    def active_network_changed(self, network: NetworkState | None) -> None:
        print(f"  -> active network: {network.path if network is not None else None}")

    def network_service_changed(self, network: NetworkState) -> None:
        print(f"  -> service changed: {network.path}")

    def active_network_state_changed(self, network: NetworkState) -> None:
        print(f"  -> active network state: {network.connection_state}")


def _replay_event(store: NetworkStateStore, transport: _RecordingTransport, event: dict[str, Any]) -> None:
    op = event.get("op")
    if op == "list":
        store.apply_managed_list_update(ManagedType(event["type"]), event.get("paths", []))
    elif op == "properties":
        store.apply_property_set_update(ManagedType(event["type"]), event["path"], event.get("properties", {}))
    elif op == "property":
        store.apply_single_property_update(ManagedType(event["type"]), event["path"], event["key"], event.get("value"))
    elif op == "ip":
        store.apply_ip_address_update(event["path"], event["address"])
    elif op == "manager":
        store.apply_manager_properties(event.get("properties", {}))
    elif op == "observe":
        transport.observed.update(event.get("paths", []))
    else:
        print(f"  !! unknown op {op!r}, skipped")


def _snapshot(store: NetworkStateStore) -> dict[str, Any]:
    return {
        "active": store.active_service_path,
        "devices": {d.path: redact_for_log(d.properties) for d in store.device_list()},
        "services": [
            {
                "path": n.path,
                "state": str(n.connection_state),
                "type": n.type,
                "properties": redact_for_log(n.properties),
            }
            for n in store.list_services()
        ],
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Replay recorded network-manager updates.")
    parser.add_argument("events", type=Path, help="JSON file with a list of update events")
    parser.add_argument("--strict", action="store_true", help="Fail on broken service ordering")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    events = json.loads(args.events.read_text(encoding="utf-8"))
    if not isinstance(events, list):
        print("Event file must contain a JSON list", file=sys.stderr)
        return 2

    transport = _RecordingTransport()
    config = NetStateConfig.from_env(strict_invariants=args.strict, scan_on_list=False)
    store = NetworkStateStore(transport, config=config)
    store.add_observer(_PrintingObserver())
    store.init()

    for index, event in enumerate(events):
        if not isinstance(event, dict):
            print(f"[{index}] not an object, skipped")
            continue
        print(f"[{index}] {event.get('op')}")
        _replay_event(store, transport, event)

    print("\nTransport requests:")
    for request in transport.requests:
        print(f"  {request}")
    print("\nFinal state:")
    print(json.dumps(_snapshot(store), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
