"""
sqlweave public package initialization.

Dialect strategies render backend specific SQL fragments (quoting, literals,
DDL, IN predicates, paging, function calls) for a statement builder.
"""

from .builder import SqlBuilder, StatementBuilder  # noqa: F401
from .config import DialectSettings  # noqa: F401
from .dialects import (
    BaseDialect,
    DialectDescriptor,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    SqlServerDialect,
    get_dialect,
    register_dialect,
)  # noqa: F401
from .errors import (
    DialectConfigurationError,
    DialectError,
    MalformedInputError,
    UnsupportedOperationError,
)  # noqa: F401
from .functions import FunctionRegistry, RenamedFunction, SqlFunction, TemplateFunction  # noqa: F401
from .scalars import SCALAR_TYPES, ScalarTypeTag, resolve_scalar_type  # noqa: F401

__all__ = [
    "BaseDialect",
    "DialectDescriptor",
    "DialectSettings",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "SqlServerDialect",
    "get_dialect",
    "register_dialect",
    "SqlBuilder",
    "StatementBuilder",
    "FunctionRegistry",
    "SqlFunction",
    "TemplateFunction",
    "RenamedFunction",
    "ScalarTypeTag",
    "SCALAR_TYPES",
    "resolve_scalar_type",
    "DialectError",
    "UnsupportedOperationError",
    "MalformedInputError",
    "DialectConfigurationError",
]
