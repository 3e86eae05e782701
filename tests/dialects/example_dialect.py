from sqlweave import BaseDialect, DialectDescriptor, ScalarTypeTag


class ExampleDialect(BaseDialect):
    name = "example"
    descriptor = DialectDescriptor(
        identity_select_string="select 1",
        random_order_by_clause="random()",
        null_column_string="null",
        default_decimal_precision=18,
        default_decimal_scale=2,
    )

    def page(self, builder, offset, limit):
        builder.trail(f" ROWS {offset} TO {limit}")

    def type_name(self, tag, length=None, precision=None, scale=None):
        if tag is ScalarTypeTag.DECIMAL:
            return "decimal({},{})".format(*self.decimal_spec(precision, scale))
        return tag.value

    def drop_index(self, index_name, table_name):
        return f"drop index {index_name}"
