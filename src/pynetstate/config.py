"""Store configuration for pynetstate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pynetstate.exceptions import NetStateConfigError


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise NetStateConfigError(f"{name} must be a boolean, got {value!r}")


@dataclasses.dataclass(frozen=True)
class NetStateConfig:
    """Store configuration.

    Parameters
    ----------
    strict_invariants : bool
        Raise :class:`~pynetstate.exceptions.InvalidatedInvariantError` when
        the services table violates connected-first ordering after a list
        update. When disabled (the default) the store logs a warning and
        re-sorts the table.
    scan_on_list : bool
        Whether :meth:`NetworkStateStore.list_services` asks the transport
        for a best-effort scan.
    request_ip_config : bool
        Whether ``IPConfig`` service properties trigger a follow-up fetch
        of the referenced IP configuration.
    log_property_payloads : bool
        Emit redacted property payloads in DEBUG logs.
    """

    strict_invariants: bool = False
    scan_on_list: bool = True
    request_ip_config: bool = True
    log_property_payloads: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> NetStateConfig:
        """Create configuration from ``NETSTATE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        NetStateConfigError
            If a variable holds something that is not a boolean spelling.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "NETSTATE_STRICT_INVARIANTS": "strict_invariants",
            "NETSTATE_SCAN_ON_LIST": "scan_on_list",
            "NETSTATE_REQUEST_IP_CONFIG": "request_ip_config",
            "NETSTATE_LOG_PROPERTY_PAYLOADS": "log_property_payloads",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            default = getattr(cls, field_name)
            config_kwargs[field_name] = _env_bool(env_key, env.get(env_key), default)

        unknown = set(overrides) - {f.name for f in dataclasses.fields(cls)}
        if unknown:
            raise NetStateConfigError(f"Unknown config fields: {', '.join(sorted(unknown))}")
        config_kwargs.update(overrides)

        return cls(**config_kwargs)
