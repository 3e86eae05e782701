"""
MySQL dialect implementation.
"""

from __future__ import annotations

from io import StringIO

from ..builder import SqlBuilder
from ..errors import MalformedInputError
from ..functions import FunctionRegistry, RenamedFunction, TemplateFunction
from ..scalars import ScalarTypeTag
from .base import BaseDialect, DialectDescriptor, FragmentWriter

MAX_ROWS = "18446744073709551615"
MAX_VARCHAR_LENGTH = 16383
MAX_VARBINARY_LENGTH = 65535

_TYPE_NAMES = {
    ScalarTypeTag.BOOLEAN: "tinyint(1)",
    ScalarTypeTag.BYTE: "tinyint unsigned",
    ScalarTypeTag.SBYTE: "tinyint",
    ScalarTypeTag.INT16: "smallint",
    ScalarTypeTag.UINT16: "smallint unsigned",
    ScalarTypeTag.INT32: "int",
    ScalarTypeTag.UINT32: "int unsigned",
    ScalarTypeTag.INT64: "bigint",
    ScalarTypeTag.UINT64: "bigint unsigned",
    ScalarTypeTag.SINGLE: "float",
    ScalarTypeTag.DOUBLE: "double",
    ScalarTypeTag.DATETIME: "datetime(6)",
    ScalarTypeTag.GUID: "char(36)",
}


class MySQLDialect(BaseDialect):
    """
    MySQL dialect using backtick quoting and ``%(name)s`` markers.

    PyMySQL expands a sequence bound to a single marker into a parenthesized
    list, so ``IN %(ids)s`` is left as is. String literals double ``%``; execute
    statements with a parameter mapping, ``{}`` when there are no markers.
    """

    name = "mysql"
    descriptor = DialectDescriptor(
        identifier_open="`",
        identifier_close="`",
        parameter_prefix="%(",
        parameter_suffix=")s",
        escape_percent_in_literals=True,
        supports_schema_namespaces=True,
        identity_column_string="int AUTO_INCREMENT primary key",
        identity_select_string="select LAST_INSERT_ID()",
        random_order_by_clause="rand()",
        supports_if_exists_before_table_name=True,
        default_decimal_precision=19,
        default_decimal_scale=5,
    )

    def register_functions(self, registry: FunctionRegistry) -> None:
        registry.register("now", TemplateFunction("UTC_TIMESTAMP()"))
        registry.register("len", RenamedFunction("CHAR_LENGTH"))

    def concat(self, writer: StringIO, *generators: FragmentWriter) -> None:
        if not generators:
            raise MalformedInputError("Concatenation needs at least one operand.")
        writer.write("CONCAT(")
        for index, generator in enumerate(generators):
            if index > 0:
                writer.write(", ")
            generator(writer)
        writer.write(")")

    def drop_foreign_key_constraint(self, name: str) -> str:
        if not name:
            raise MalformedInputError("Foreign key constraint name must not be empty.")
        return f" drop foreign key {name}"

    def type_name(
        self,
        tag: ScalarTypeTag,
        length: int | None = None,
        precision: int | None = None,
        scale: int | None = None,
    ) -> str:
        if tag is ScalarTypeTag.STRING:
            if length is None:
                return "varchar(255)"
            return f"varchar({length})" if length <= MAX_VARCHAR_LENGTH else "longtext"
        if tag in (ScalarTypeTag.BINARY, ScalarTypeTag.OBJECT):
            if length is not None and length <= MAX_VARBINARY_LENGTH:
                return f"varbinary({length})"
            return "longblob"
        if tag is ScalarTypeTag.DECIMAL:
            resolved_precision, resolved_scale = self.decimal_spec(precision, scale)
            return f"decimal({resolved_precision},{resolved_scale})"
        return _TYPE_NAMES[tag]

    def drop_index(self, index_name: str, table_name: str) -> str:
        return (
            f"drop index {self.quote_for_column_name(index_name)} "
            f"on {self.quote_for_table_name(table_name)}"
        )

    def page(self, builder: SqlBuilder, offset: str | None, limit: str | None) -> None:
        if offset is None and limit is None:
            return
        self.check_paging_order(builder)
        builder.trail(f" LIMIT {limit if limit is not None else MAX_ROWS}")
        if offset is not None:
            builder.trail(f" OFFSET {offset}")
