"""Custom exception hierarchy for pynetstate."""

from __future__ import annotations


class NetStateError(Exception):
    """Base exception for all pynetstate errors."""


class NetStateConfigError(NetStateError):
    """Invalid or missing configuration."""


class PropertyValueError(NetStateError):
    """A property value was rejected at the diff boundary.

    Raised by the per-key type validator. The property differ catches it and
    skips the offending key, so it never escapes an ``apply_*`` call.
    """

    def __init__(self, message: str, *, key: str = "", path: str = "") -> None:
        self.key = key
        self.path = path
        super().__init__(message)


class InvalidatedInvariantError(NetStateError):
    """Service ordering no longer satisfies connected-first priority.

    Only raised when ``NetStateConfig.strict_invariants`` is enabled. In the
    default mode the store logs a warning and re-sorts instead.
    """
