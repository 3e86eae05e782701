"""
Dialect strategy base class describing SQL fragment rendering.

Concrete dialects describe their syntax with a :class:`DialectDescriptor` and
override the members that have no portable default: ``page``, ``type_name``
and ``drop_index``. Everything else renders SQL-standard text unless the
descriptor says otherwise.
"""

from __future__ import annotations

import ctypes
import datetime
import decimal
import math
import numbers
from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields
from io import StringIO
from typing import Any, ClassVar, List, Optional

from ..builder import SqlBuilder, StatementBuilder
from ..config import DialectSettings
from ..errors import DialectConfigurationError, MalformedInputError, UnsupportedOperationError
from ..functions import FunctionLike, FunctionRegistry
from ..scalars import ScalarTypeTag, resolve_scalar_type
from ..utils import get_logger

FragmentWriter = Callable[[StringIO], None]

_UNMAPPED_LITERAL_KINDS = (bytes, bytearray, memoryview, complex)
_ORDER_PUNCTUATION = frozenset({",", "ASC", "DESC"})


@dataclass(frozen=True)
class DialectDescriptor:
    """
    Per-backend syntax switches. Read-only once a dialect class is defined.

    ``identity_select_string``, ``random_order_by_clause`` and the decimal
    defaults have no portable value; a dialect leaving any of them unset cannot
    be constructed.

    ``escape_percent_in_literals`` is for drivers using ``%(name)s`` markers:
    ``%`` inside string literals is doubled, so statements from such a dialect
    must always be executed with a parameter mapping (``{}`` when empty).
    """

    identifier_open: str = '"'
    identifier_close: str = '"'
    string_quote: str = "'"
    string_quote_escape: str = "''"
    escape_percent_in_literals: bool = False
    parameter_prefix: str = "@"
    parameter_suffix: str = ""
    concat_operator: str = "||"
    supports_schema_namespaces: bool = False
    create_table_string: str = "create table"
    identity_column_string: str = "integer generated by default as identity primary key"
    has_data_type_in_identity_column: bool = False
    identity_select_string: Optional[str] = None
    null_column_string: str = ""
    primary_key_string: str = "primary key"
    default_values_insert: str = "DEFAULT VALUES"
    random_order_by_clause: Optional[str] = None
    supports_identity_columns: bool = True
    supports_unique: bool = True
    supports_foreign_key_constraint_in_alter_table: bool = True
    supports_if_exists_before_table_name: bool = False
    supports_if_exists_after_table_name: bool = False
    cascade_constraints_string: str = ""
    prefix_index: bool = False
    default_decimal_precision: Optional[int] = None
    default_decimal_scale: Optional[int] = None

    def missing_members(self) -> List[str]:
        return [field.name for field in fields(self) if getattr(self, field.name) is None]


class BaseDialect:
    """
    Translate provider-neutral operations into fragments for one backend.

    Instances are immutable after construction and safe to share between
    threads; the function registry is filled by :meth:`register_functions`
    and frozen before ``__init__`` returns.
    """

    name: ClassVar[str] = ""
    descriptor: ClassVar[DialectDescriptor] = DialectDescriptor()

    _required_overrides: ClassVar[tuple[str, ...]] = ("page", "type_name", "drop_index")

    def __init__(self, settings: DialectSettings | None = None) -> None:
        self.settings = settings or DialectSettings()
        self.logger = get_logger(f"dialects.{self.name or type(self).__name__.lower()}")
        self._check_definition()
        self.functions = FunctionRegistry()
        self.register_functions(self.functions)
        self.functions.freeze()
        self.logger.debug(
            "Constructed %s dialect with %s registered function(s)", self.name, len(self.functions)
        )

    def _check_definition(self) -> None:
        cls = type(self)
        if not self.name:
            raise UnsupportedOperationError(f"{cls.__name__} does not declare a dialect name.")
        missing = [
            member
            for member in self._required_overrides
            if getattr(cls, member) is getattr(BaseDialect, member)
        ]
        missing.extend(f"descriptor.{member}" for member in self.descriptor.missing_members())
        if missing:
            raise UnsupportedOperationError(
                f"{cls.__name__} must provide: {', '.join(missing)}"
            )
        if (
            self.descriptor.supports_if_exists_before_table_name
            and self.descriptor.supports_if_exists_after_table_name
        ):
            raise DialectConfigurationError(
                f"{cls.__name__} enables IF EXISTS both before and after the table name."
            )

    # Type tags ---------------------------------------------------------
    def get_scalar_type(self, tp: Any) -> ScalarTypeTag:
        return resolve_scalar_type(tp)

    # Identifiers and literals -----------------------------------------
    def quote_identifier(self, identifier: str) -> str:
        close = self.descriptor.identifier_close
        escaped = identifier.replace(close, close * 2)
        return f"{self.descriptor.identifier_open}{escaped}{close}"

    def quote_for_column_name(self, column_name: str) -> str:
        return self.quote_identifier(column_name)

    def quote_for_table_name(self, table_name: str) -> str:
        if self.descriptor.supports_schema_namespaces and "." in table_name:
            return ".".join(self.quote_identifier(part) for part in table_name.split("."))
        return self.quote_identifier(table_name)

    def quote_string(self, value: str) -> str:
        """
        Render ``value`` as a quoted literal, escaping embedded quote characters.

        Dialects with ``escape_percent_in_literals`` also double ``%``.
        """
        quote = self.descriptor.string_quote
        escaped = value.replace(quote, self.descriptor.string_quote_escape)
        if self.descriptor.escape_percent_in_literals:
            escaped = escaped.replace("%", "%%")
        return f"{quote}{escaped}{quote}"

    def sql_value(self, value: Any) -> str:
        """
        Render a Python value as an inline SQL literal.

        ``None`` becomes ``null``, booleans ``1``/``0``, numbers use invariant
        notation (fixed-width ``ctypes`` scalars are unwrapped, fractions are
        rendered as decimals), temporal values and any other object are quoted
        strings.
        Binary buffers and complex numbers have no portable literal and fall
        back to ``null`` unless ``settings.strict_literals`` is enabled.
        """
        if isinstance(value, ctypes._SimpleCData):
            return self.sql_value(value.value)
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, str):
            return self.quote_string(value)
        if isinstance(value, _UNMAPPED_LITERAL_KINDS):
            return self._unmapped_literal(value)
        if isinstance(value, (numbers.Real, decimal.Decimal)):
            return self._format_number(value)
        if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
            return self.quote_string(self._format_temporal(value))
        return self.quote_string(str(value))

    def _format_number(self, value: numbers.Real | decimal.Decimal) -> str:
        if isinstance(value, numbers.Integral):
            return str(int(value))
        if isinstance(value, numbers.Rational):
            value = decimal.Decimal(value.numerator) / decimal.Decimal(value.denominator)
        if isinstance(value, decimal.Decimal):
            if not value.is_finite():
                raise MalformedInputError(f"Cannot render non-finite decimal {value!r} as SQL.")
            return format(value, "f")
        value = float(value)
        if not math.isfinite(value):
            raise MalformedInputError(f"Cannot render non-finite float {value!r} as SQL.")
        return repr(value)

    @staticmethod
    def _format_temporal(value: datetime.date | datetime.time) -> str:
        if isinstance(value, datetime.datetime):
            return value.isoformat(sep=" ")
        return value.isoformat()

    def _unmapped_literal(self, value: Any) -> str:
        kind = type(value).__name__
        if self.settings.strict_literals:
            raise UnsupportedOperationError(f"No SQL literal form for values of type '{kind}'.")
        self.logger.warning("Rendering unmapped %s value as null literal", kind)
        return "null"

    def parameter_placeholder(self, name: str) -> str:
        return f"{self.descriptor.parameter_prefix}{name}{self.descriptor.parameter_suffix}"

    # DDL ---------------------------------------------------------------
    def create_table(self, table_name: str, column_definitions: Sequence[str]) -> str:
        if not table_name:
            raise MalformedInputError("Table name must not be empty.")
        if not column_definitions:
            raise MalformedInputError(f"Table '{table_name}' needs at least one column.")
        columns = ", ".join(column_definitions)
        return (
            f"{self.descriptor.create_table_string} "
            f"{self.quote_for_table_name(table_name)} ({columns})"
        )

    def render_column_definition(
        self,
        column: str,
        tag: ScalarTypeTag,
        *,
        length: int | None = None,
        precision: int | None = None,
        scale: int | None = None,
        nullable: bool = True,
        identity: bool = False,
    ) -> str:
        quoted = self.quote_for_column_name(column)
        if identity:
            if not self.descriptor.supports_identity_columns:
                raise UnsupportedOperationError(f"{self.name} does not support identity columns.")
            if self.descriptor.has_data_type_in_identity_column:
                column_type = self.type_name(tag, length, precision, scale)
                return f"{quoted} {column_type} {self.descriptor.identity_column_string}"
            return f"{quoted} {self.descriptor.identity_column_string}"

        column_type = self.type_name(tag, length, precision, scale)
        if not nullable:
            return f"{quoted} {column_type} NOT NULL"
        if self.descriptor.null_column_string:
            return f"{quoted} {column_type} {self.descriptor.null_column_string}"
        return f"{quoted} {column_type}"

    def drop_table(self, table_name: str) -> str:
        if not table_name:
            raise MalformedInputError("Table name must not be empty.")
        parts = ["drop table "]
        if self.descriptor.supports_if_exists_before_table_name:
            parts.append("if exists ")
        parts.append(self.quote_for_table_name(table_name))
        parts.append(self.descriptor.cascade_constraints_string)
        if self.descriptor.supports_if_exists_after_table_name:
            parts.append(" if exists")
        sql = "".join(parts)
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            table_name,
        )
        return sql

    def add_foreign_key_constraint(
        self,
        name: str,
        source_columns: Sequence[str],
        target_table: str,
        target_columns: Sequence[str],
        *,
        primary_key: bool,
    ) -> str:
        if not name:
            raise MalformedInputError("Foreign key constraint name must not be empty.")
        if not target_table:
            raise MalformedInputError(f"Foreign key '{name}' has no target table.")
        if not source_columns:
            raise MalformedInputError(f"Foreign key '{name}' has no source columns.")
        if not primary_key:
            if not target_columns:
                raise MalformedInputError(f"Foreign key '{name}' has no target columns.")
            if len(target_columns) != len(source_columns):
                raise MalformedInputError(
                    f"Foreign key '{name}' maps {len(source_columns)} source column(s) "
                    f"to {len(target_columns)} target column(s)."
                )

        parts: List[str] = []
        if self.descriptor.supports_foreign_key_constraint_in_alter_table:
            parts.append(" add")
        parts.append(f" constraint {name} foreign key ({', '.join(source_columns)})")
        parts.append(f" references {target_table}")
        if not primary_key:
            parts.append(f" ({', '.join(target_columns)})")
        return "".join(parts)

    def drop_foreign_key_constraint(self, name: str) -> str:
        if not name:
            raise MalformedInputError("Foreign key constraint name must not be empty.")
        return f" drop constraint {name}"

    def drop_index(self, index_name: str, table_name: str) -> str:
        raise UnsupportedOperationError(f"{type(self).__name__} does not implement drop_index.")

    def type_name(
        self,
        tag: ScalarTypeTag,
        length: int | None = None,
        precision: int | None = None,
        scale: int | None = None,
    ) -> str:
        raise UnsupportedOperationError(f"{type(self).__name__} does not implement type_name.")

    def decimal_spec(self, precision: int | None, scale: int | None) -> tuple[int, int]:
        resolved_precision = (
            precision if precision is not None else self.descriptor.default_decimal_precision
        )
        resolved_scale = scale if scale is not None else self.descriptor.default_decimal_scale
        return int(resolved_precision), int(resolved_scale)  # type: ignore[arg-type]

    # Predicates --------------------------------------------------------
    def in_operator(self, values: str) -> str:
        if values.startswith(self.descriptor.parameter_prefix) and "," not in values:
            return f" IN {values}"
        return f" IN ({values}) "

    def not_in_operator(self, values: str) -> str:
        return " NOT" + self.in_operator(values)

    def in_select_operator(self, subquery: str) -> str:
        return f" IN ({subquery}) "

    def not_in_select_operator(self, subquery: str) -> str:
        return f" NOT IN ({subquery}) "

    # Pagination --------------------------------------------------------
    def page(self, builder: SqlBuilder, offset: str | None, limit: str | None) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not implement page.")

    def check_paging_order(self, builder: SqlBuilder) -> bool:
        """
        Return whether ``builder`` carries an ORDER BY clause.

        Paging without one yields an unspecified row window; this is logged,
        or rejected when ``settings.require_order_for_paging`` is set.
        """
        if builder.has_order:
            return True
        if self.settings.require_order_for_paging:
            raise MalformedInputError("Paging requires an ORDER BY clause.")
        self.logger.warning("Paging without ORDER BY; the returned row window is not deterministic.")
        return False

    def create_builder(self, table_prefix: str = "") -> StatementBuilder:
        return StatementBuilder(table_prefix, self)

    # Functions ---------------------------------------------------------
    def register_functions(self, registry: FunctionRegistry) -> None:
        """
        Hook for subclasses to register their function translations.
        """

    def register_function(self, name: str, renderer: FunctionLike) -> None:
        self.functions.register(name, renderer)

    def render_function(self, name: str, args: Sequence[str]) -> str:
        return self.functions.render(name, args)

    # Concatenation -----------------------------------------------------
    def concat(self, writer: StringIO, *generators: FragmentWriter) -> None:
        if not generators:
            raise MalformedInputError("Concatenation needs at least one operand.")
        writer.write("(")
        for index, generator in enumerate(generators):
            if index > 0:
                writer.write(f" {self.descriptor.concat_operator} ")
            generator(writer)
        writer.write(")")

    def concat_fragments(self, *generators: FragmentWriter) -> str:
        writer = StringIO()
        self.concat(writer, *generators)
        return writer.getvalue()

    # Distinct / order by -----------------------------------------------
    def distinct_order_by_select(self, select: List[str], order_by: Sequence[str]) -> List[str]:
        """
        Append order-by columns missing from a DISTINCT select list.

        Membership is textual: a column spelled differently in the two lists
        is appended again.
        """
        for segment in order_by:
            if segment.strip().upper() in _ORDER_PUNCTUATION:
                continue
            if segment not in select:
                select.append(",")
                select.append(segment)
        return select

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
