"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from ..builder import SqlBuilder
from ..functions import FunctionRegistry, RenamedFunction, TemplateFunction
from ..scalars import ScalarTypeTag
from .base import BaseDialect, DialectDescriptor

_TYPE_NAMES = {
    ScalarTypeTag.BINARY: "bytea",
    ScalarTypeTag.OBJECT: "bytea",
    ScalarTypeTag.BOOLEAN: "boolean",
    ScalarTypeTag.BYTE: "smallint",
    ScalarTypeTag.SBYTE: "smallint",
    ScalarTypeTag.INT16: "smallint",
    ScalarTypeTag.UINT16: "int",
    ScalarTypeTag.INT32: "int",
    ScalarTypeTag.UINT32: "bigint",
    ScalarTypeTag.INT64: "bigint",
    ScalarTypeTag.UINT64: "numeric(20,0)",
    ScalarTypeTag.SINGLE: "real",
    ScalarTypeTag.DOUBLE: "double precision",
    ScalarTypeTag.DATETIME: "timestamp",
    ScalarTypeTag.GUID: "uuid",
}


class PostgresDialect(BaseDialect):
    """
    PostgreSQL dialect using psycopg ``%(name)s`` markers.

    A single marker on the right of IN is bound as an array and compared with
    ``= ANY(...)``. String literals double ``%``; execute statements with a
    parameter mapping, ``{}`` when there are no markers.
    """

    name = "postgresql"
    descriptor = DialectDescriptor(
        parameter_prefix="%(",
        parameter_suffix=")s",
        escape_percent_in_literals=True,
        supports_schema_namespaces=True,
        identity_column_string="serial primary key",
        identity_select_string="RETURNING",
        random_order_by_clause="random()",
        supports_if_exists_before_table_name=True,
        prefix_index=True,
        default_decimal_precision=19,
        default_decimal_scale=5,
    )

    def register_functions(self, registry: FunctionRegistry) -> None:
        registry.register("now", TemplateFunction("now() at time zone 'utc'"))
        registry.register("len", RenamedFunction("length"))

    def _is_single_placeholder(self, values: str) -> bool:
        return values.startswith(self.descriptor.parameter_prefix) and "," not in values

    def in_operator(self, values: str) -> str:
        if self._is_single_placeholder(values):
            return f" = ANY({values})"
        return f" IN ({values}) "

    def not_in_operator(self, values: str) -> str:
        if self._is_single_placeholder(values):
            return f" <> ALL({values})"
        return f" NOT IN ({values}) "

    def type_name(
        self,
        tag: ScalarTypeTag,
        length: int | None = None,
        precision: int | None = None,
        scale: int | None = None,
    ) -> str:
        if tag is ScalarTypeTag.STRING:
            return f"varchar({length})" if length else "text"
        if tag is ScalarTypeTag.DECIMAL:
            resolved_precision, resolved_scale = self.decimal_spec(precision, scale)
            return f"numeric({resolved_precision},{resolved_scale})"
        return _TYPE_NAMES[tag]

    def drop_index(self, index_name: str, table_name: str) -> str:
        return f"drop index if exists {self.quote_for_column_name(index_name)}"

    def page(self, builder: SqlBuilder, offset: str | None, limit: str | None) -> None:
        if offset is None and limit is None:
            return
        self.check_paging_order(builder)
        if limit is not None:
            builder.trail(f" LIMIT {limit}")
        if offset is not None:
            builder.trail(f" OFFSET {offset}")
