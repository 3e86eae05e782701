"""
SQLite dialect implementation.
"""

from __future__ import annotations

from ..builder import SqlBuilder
from ..functions import FunctionRegistry, RenamedFunction, TemplateFunction
from ..scalars import ScalarTypeTag
from .base import BaseDialect, DialectDescriptor

_TYPE_NAMES = {
    ScalarTypeTag.BOOLEAN: "BOOLEAN",
    ScalarTypeTag.BYTE: "INTEGER",
    ScalarTypeTag.SBYTE: "INTEGER",
    ScalarTypeTag.INT16: "INTEGER",
    ScalarTypeTag.UINT16: "INTEGER",
    ScalarTypeTag.INT32: "INTEGER",
    ScalarTypeTag.UINT32: "INTEGER",
    ScalarTypeTag.INT64: "INTEGER",
    ScalarTypeTag.UINT64: "INTEGER",
    ScalarTypeTag.SINGLE: "REAL",
    ScalarTypeTag.DOUBLE: "REAL",
    ScalarTypeTag.DATETIME: "DATETIME",
    ScalarTypeTag.GUID: "TEXT",
    ScalarTypeTag.STRING: "TEXT",
    ScalarTypeTag.BINARY: "BLOB",
    ScalarTypeTag.OBJECT: "BLOB",
}


class SQLiteDialect(BaseDialect):
    """
    SQLite dialect using named ``:param`` markers and LIMIT/OFFSET paging.
    """

    name = "sqlite"
    descriptor = DialectDescriptor(
        parameter_prefix=":",
        identity_column_string="integer primary key autoincrement",
        identity_select_string="select last_insert_rowid()",
        random_order_by_clause="random()",
        supports_foreign_key_constraint_in_alter_table=False,
        supports_if_exists_before_table_name=True,
        prefix_index=True,
        default_decimal_precision=19,
        default_decimal_scale=5,
    )

    def register_functions(self, registry: FunctionRegistry) -> None:
        registry.register("now", TemplateFunction("CURRENT_TIMESTAMP"))
        registry.register("len", RenamedFunction("length"))
        registry.register("substring", RenamedFunction("substr"))

    def in_operator(self, values: str) -> str:
        # sqlite3 cannot bind a sequence to one marker
        return f" IN ({values}) "

    def type_name(
        self,
        tag: ScalarTypeTag,
        length: int | None = None,
        precision: int | None = None,
        scale: int | None = None,
    ) -> str:
        if tag is ScalarTypeTag.DECIMAL:
            resolved_precision, resolved_scale = self.decimal_spec(precision, scale)
            return f"NUMERIC({resolved_precision},{resolved_scale})"
        return _TYPE_NAMES[tag]

    def drop_index(self, index_name: str, table_name: str) -> str:
        return f"drop index if exists {self.quote_for_column_name(index_name)}"

    def page(self, builder: SqlBuilder, offset: str | None, limit: str | None) -> None:
        if offset is None and limit is None:
            return
        self.check_paging_order(builder)
        builder.trail(" LIMIT ")
        builder.trail(limit if limit is not None else "-1")
        if offset is not None:
            builder.trail(" OFFSET ")
            builder.trail(offset)
