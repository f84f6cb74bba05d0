"""Ordered, path-keyed ownership of managed entities.

An :class:`EntityTable` is the only owner of the entities of one kind.
Reconciliation against a new authoritative path list rebuilds the order but
reuses every entity whose path survives, so state parsed for that entity
(and anyone watching it) is not thrown away.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from pynetstate.models import ManagedState, ManagedType, NetworkState, create_managed_state

_logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconcileEntry:
    """Outcome for one path still present after a reconcile."""

    entity: ManagedState
    created: bool
    request_properties: bool


@dataclass(slots=True)
class ReconcileResult:
    entries: list[ReconcileEntry] = field(default_factory=list)
    removed: list[ManagedState] = field(default_factory=list)
    changed: bool = False
    """Whether membership or order differs from before the reconcile."""


def service_priority(network: ManagedState) -> int:
    """Sort bucket for a service: connected, then connecting, then the rest."""
    if not isinstance(network, NetworkState):
        return 2
    if network.is_connected():
        return 0
    if network.is_connecting():
        return 1
    return 2


def is_priority_ordered(entities: Iterable[ManagedState]) -> bool:
    """Return ``True`` when no entity sorts before one with a better bucket."""
    worst_seen = 0
    for entity in entities:
        bucket = service_priority(entity)
        if bucket < worst_seen:
            return False
        worst_seen = bucket
    return True


class EntityTable:
    """Entities of one :class:`ManagedType`, keyed by path, in table order."""

    def __init__(self, managed_type: ManagedType) -> None:
        self._managed_type = managed_type
        self._entities: dict[str, ManagedState] = {}

    @property
    def managed_type(self) -> ManagedType:
        return self._managed_type

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[ManagedState]:
        return iter(list(self._entities.values()))

    def paths(self) -> list[str]:
        return list(self._entities)

    def lookup(self, path: str) -> ManagedState | None:
        return self._entities.get(path)

    def lookup_by_type(self, type_: str) -> ManagedState | None:
        """First entity in table order whose technology type is *type_*."""
        for entity in self._entities.values():
            if entity.type == type_:
                return entity
        return None

    def upsert(self, path: str) -> ManagedState:
        """Return the entity for *path*, appending a new one if it is unknown."""
        entity = self._entities.get(path)
        if entity is None:
            entity = create_managed_state(self._managed_type, path)
            self._entities[path] = entity
        return entity

    def reconcile(self, paths: Iterable[str], is_observing: Callable[[str], bool]) -> ReconcileResult:
        """Rebuild the table from the authoritative ordered *paths*.

        Entities whose path is still listed are kept (same object) in their new
        position; unlisted entities are dropped. A path needs a property fetch
        when it is new, or when the transport has just started observing it.
        """
        previous = self._entities
        before = list(previous)
        rebuilt: dict[str, ManagedState] = {}
        result = ReconcileResult()

        for path in paths:
            if path in rebuilt:
                continue
            observing = is_observing(path)
            entity = previous.get(path)
            if entity is None:
                entity = create_managed_state(self._managed_type, path)
                created = True
                request_properties = True
            else:
                created = False
                request_properties = observing and not entity.is_observed
            if observing:
                entity.is_observed = True
            rebuilt[path] = entity
            result.entries.append(
                ReconcileEntry(entity=entity, created=created, request_properties=request_properties)
            )

        result.removed = [entity for path, entity in previous.items() if path not in rebuilt]
        self._entities = rebuilt
        result.changed = list(rebuilt) != before
        _logger.debug(
            "Reconciled %s table: entries=%d created=%d removed=%d",
            self._managed_type,
            len(rebuilt),
            sum(1 for e in result.entries if e.created),
            len(result.removed),
        )
        return result

    def reorder(self, key: Callable[[ManagedState], int]) -> bool:
        """Stable-sort by *key*, keeping current order as the tie-break.

        Devices keep the order the network manager lists them in; calling this
        on a device table is a no-op. Returns whether the order changed.
        """
        if self._managed_type != ManagedType.SERVICE:
            return False
        before = list(self._entities)
        ordered = sorted(self._entities.values(), key=key)
        self._entities = {entity.path: entity for entity in ordered}
        return list(self._entities) != before

    def clear(self) -> None:
        self._entities = {}
