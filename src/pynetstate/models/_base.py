"""Base model and value helpers for managed network entities.

Every device and service mirrored from the network manager inherits from
:class:`ManagedState` which provides:

* a stable ``path`` identifier fixed at creation
* a ``properties`` bag holding the last value seen for each key
* per-key expected types (``EXPECTED_TYPES``) enforced at the diff boundary

Property values form a tagged variant: strings, numbers, booleans, and
lists/dicts of those. :func:`is_property_value` checks the variant shape and
:func:`validate_property` checks a value against the type declared for its key.
"""

from __future__ import annotations

import enum
import functools
import math
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from pynetstate._constants import PROP_NAME, PROP_TYPE
from pynetstate.exceptions import PropertyValueError

PropertyValue = str | int | float | bool | list[Any] | dict[str, Any]
"""A value carried in a property dictionary. Containers nest the same variant."""

_MAX_DEPTH = 16


class ManagedType(enum.StrEnum):
    """Kind of managed entity. Fixed at creation."""

    DEVICE = "device"
    SERVICE = "service"


def is_property_value(value: Any, _depth: int = 0) -> bool:
    """Return ``True`` when *value* fits the property value variant."""
    if _depth > _MAX_DEPTH:
        return False
    if isinstance(value, (str, bool, int)):
        return True
    if isinstance(value, float):
        return not math.isnan(value)
    if isinstance(value, list):
        return all(is_property_value(item, _depth + 1) for item in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and is_property_value(v, _depth + 1) for k, v in value.items())
    return False


def values_equal(left: Any, right: Any) -> bool:
    """Compare two property values by content.

    Plain ``==`` treats ``True == 1`` and ``1 == 1.0``; the network manager
    never does, so the variant tag must match too.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, list):
        return len(left) == len(right) and all(values_equal(a, b) for a, b in zip(left, right, strict=True))
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(values_equal(v, right[k]) for k, v in left.items())
    return bool(left == right)


@functools.cache
def _adapter(expected: Any) -> TypeAdapter[Any]:
    return TypeAdapter(expected)


def validate_property(key: str, expected: Any, value: Any) -> Any:
    """Validate *value* against the *expected* type declared for *key*.

    Validation is strict: a boolean is not accepted where an integer is
    declared and numeric strings are not coerced.

    Raises
    ------
    PropertyValueError
        If the value does not match.
    """
    try:
        return _adapter(expected).validate_python(value, strict=True)
    except ValidationError as exc:
        raise PropertyValueError(
            f"Property {key!r} expects {getattr(expected, '__name__', expected)}, got {type(value).__name__}",
            key=key,
        ) from exc


class ManagedState(BaseModel):
    """Base for devices and services mirrored from the network manager.

    Instances are owned by the entity table of their kind. Callers must not
    hold on to an instance across managed-list update cycles.
    """

    EXPECTED_TYPES: ClassVar[dict[str, Any]] = {
        PROP_NAME: str,
        PROP_TYPE: str,
    }
    """Declared value type per property key. Keys not listed accept any variant."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    path: str
    managed_type: ManagedType
    properties: dict[str, Any] = Field(default_factory=dict)
    is_observed: bool = False

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must be non-empty")
        return value

    def _str_property(self, key: str) -> str:
        value = self.properties.get(key)
        return value if isinstance(value, str) else ""

    @property
    def name(self) -> str:
        return self._str_property(PROP_NAME)

    @property
    def type(self) -> str:
        """Technology type, e.g. ``wifi`` or ``ethernet``."""
        return self._str_property(PROP_TYPE)
