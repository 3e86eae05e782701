"""
Dialect strategy registry.
"""

from __future__ import annotations

from typing import Dict, Type

from ..config import DialectSettings
from ..errors import UnsupportedOperationError
from .base import BaseDialect, DialectDescriptor
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect
from .sqlserver import SqlServerDialect

_DIALECTS: Dict[str, Type[BaseDialect]] = {
    "sqlite": SQLiteDialect,
    "postgresql": PostgresDialect,
    "postgres": PostgresDialect,
    "mysql": MySQLDialect,
    "sqlserver": SqlServerDialect,
    "mssql": SqlServerDialect,
}


def register_dialect(name: str, dialect_cls: Type[BaseDialect]) -> None:
    _DIALECTS[name.lower()] = dialect_cls


def get_dialect(name: str, settings: DialectSettings | None = None) -> BaseDialect:
    dialect_cls = _DIALECTS.get(name.lower())
    if dialect_cls is None:
        registered = sorted(_DIALECTS)
        raise UnsupportedOperationError(
            f"Unsupported dialect: '{name}'. Registered dialects: {registered}."
        )
    return dialect_cls(settings)


__all__ = [
    "BaseDialect",
    "DialectDescriptor",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "SqlServerDialect",
    "get_dialect",
    "register_dialect",
]
