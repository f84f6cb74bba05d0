"""Normalization helpers.

Centralizes defensive parsing of list payloads so the state store only ever
sees clean path and technology lists.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

_logger = logging.getLogger(__name__)


def _clean_string(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value if value.strip() else None


def normalize_paths(entries: Iterable[Any]) -> list[str]:
    """Return the usable entity paths from a managed-list payload.

    Non-string and empty entries are dropped. A path listed twice keeps its
    first position; the network manager never does this, but an entity table
    cannot hold two records for one path.
    """
    paths: list[str] = []
    seen: set[str] = set()
    for entry in entries:
        path = _clean_string(entry)
        if path is None:
            _logger.warning("Ignoring malformed path entry: %r", entry)
            continue
        if path in seen:
            _logger.warning("Ignoring duplicate path entry: %s", path)
            continue
        seen.add(path)
        paths.append(path)
    return paths


def normalize_technologies(entries: Iterable[Any]) -> set[str]:
    """Return the technology names from a manager technology list."""
    technologies: set[str] = set()
    for entry in entries:
        technology = _clean_string(entry)
        if technology is None:
            _logger.warning("Ignoring malformed technology entry: %r", entry)
            continue
        technologies.add(technology)
    return technologies


def as_list(value: Any) -> list[Any] | None:
    """Return *value* as a list when it is a list or tuple payload."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return None
