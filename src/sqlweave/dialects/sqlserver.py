"""
Microsoft SQL Server dialect implementation.
"""

from __future__ import annotations

from ..builder import SqlBuilder
from ..functions import FunctionRegistry, RenamedFunction, TemplateFunction
from ..scalars import ScalarTypeTag
from .base import BaseDialect, DialectDescriptor

MAX_NVARCHAR_LENGTH = 4000
MAX_VARBINARY_LENGTH = 8000

_TYPE_NAMES = {
    ScalarTypeTag.BOOLEAN: "bit",
    ScalarTypeTag.BYTE: "tinyint",
    ScalarTypeTag.SBYTE: "smallint",
    ScalarTypeTag.INT16: "smallint",
    ScalarTypeTag.UINT16: "int",
    ScalarTypeTag.INT32: "int",
    ScalarTypeTag.UINT32: "bigint",
    ScalarTypeTag.INT64: "bigint",
    ScalarTypeTag.UINT64: "decimal(20,0)",
    ScalarTypeTag.SINGLE: "real",
    ScalarTypeTag.DOUBLE: "float",
    ScalarTypeTag.DATETIME: "datetime2",
    ScalarTypeTag.GUID: "uniqueidentifier",
}


class SqlServerDialect(BaseDialect):
    """
    SQL Server dialect with bracket quoting and OFFSET/FETCH paging.

    A limit without an offset is rewritten to ``TOP (n)``. OFFSET requires an
    ORDER BY clause, so ``(SELECT NULL)`` is ordered on when none was given.
    """

    name = "sqlserver"
    descriptor = DialectDescriptor(
        identifier_open="[",
        identifier_close="]",
        parameter_prefix="@",
        concat_operator="+",
        supports_schema_namespaces=True,
        identity_column_string="IDENTITY(1,1) primary key",
        has_data_type_in_identity_column=True,
        identity_select_string="select SCOPE_IDENTITY()",
        random_order_by_clause="newid()",
        supports_if_exists_before_table_name=True,
        default_decimal_precision=19,
        default_decimal_scale=5,
    )

    def register_functions(self, registry: FunctionRegistry) -> None:
        registry.register("now", TemplateFunction("getutcdate()"))
        registry.register("len", RenamedFunction("LEN"))
        registry.register("length", RenamedFunction("LEN"))

    def type_name(
        self,
        tag: ScalarTypeTag,
        length: int | None = None,
        precision: int | None = None,
        scale: int | None = None,
    ) -> str:
        if tag is ScalarTypeTag.STRING:
            if length is None:
                return "nvarchar(255)"
            return f"nvarchar({length})" if length <= MAX_NVARCHAR_LENGTH else "nvarchar(max)"
        if tag in (ScalarTypeTag.BINARY, ScalarTypeTag.OBJECT):
            if length is not None and length <= MAX_VARBINARY_LENGTH:
                return f"varbinary({length})"
            return "varbinary(max)"
        if tag is ScalarTypeTag.DECIMAL:
            resolved_precision, resolved_scale = self.decimal_spec(precision, scale)
            return f"decimal({resolved_precision},{resolved_scale})"
        return _TYPE_NAMES[tag]

    def drop_index(self, index_name: str, table_name: str) -> str:
        return (
            f"drop index if exists {self.quote_for_column_name(index_name)} "
            f"on {self.quote_for_table_name(table_name)}"
        )

    def page(self, builder: SqlBuilder, offset: str | None, limit: str | None) -> None:
        if offset is None and limit is None:
            return
        ordered = self.check_paging_order(builder)
        if offset is None:
            builder.insert_selector(f"TOP ({limit})")
            return
        if not ordered:
            builder.order_by("(SELECT NULL)")
        builder.trail(f" OFFSET {offset} ROWS")
        if limit is not None:
            builder.trail(f" FETCH NEXT {limit} ROWS ONLY")
