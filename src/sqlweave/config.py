"""
Runtime settings shared by every dialect instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import DialectConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DialectConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _read_bool(env: Mapping[str, str], key: str) -> bool | None:
    if key not in env:
        return None
    return _parse_bool(env[key], key=key)


@dataclass(frozen=True)
class DialectSettings:
    """
    Policy switches applied while rendering fragments.

    ``strict_literals`` turns the ``null`` fallback for unmapped literal kinds
    into an error. ``require_order_for_paging`` rejects paged statements that
    carry no ORDER BY clause instead of only logging them.
    """

    strict_literals: bool = False
    require_order_for_paging: bool = False

    @classmethod
    def from_env(
        cls,
        prefix: str = "SQLWEAVE_",
        *,
        environ: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> "DialectSettings":
        """
        Build settings from ``<prefix>STRICT_LITERALS`` and
        ``<prefix>REQUIRE_ORDER_FOR_PAGING``. Explicit keyword arguments win.
        """

        env = os.environ if environ is None else environ
        strict = _read_bool(env, f"{prefix}STRICT_LITERALS")
        require_order = _read_bool(env, f"{prefix}REQUIRE_ORDER_FOR_PAGING")

        values: dict[str, Any] = {}
        if strict is not None:
            values["strict_literals"] = strict
        if require_order is not None:
            values["require_order_for_paging"] = require_order
        values.update(kwargs)
        return cls(**values)
