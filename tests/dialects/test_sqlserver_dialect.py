import logging

import pytest

from sqlweave import DialectSettings, MalformedInputError, ScalarTypeTag, SqlServerDialect


def test_sqlserver_bracket_quoting():
    dialect = SqlServerDialect()
    assert dialect.quote_identifier("Order Details") == "[Order Details]"
    assert dialect.quote_identifier("odd]name") == "[odd]]name]"
    assert dialect.quote_for_table_name("dbo.Users") == "[dbo].[Users]"


def test_sqlserver_limit_only_uses_top():
    dialect = SqlServerDialect()
    builder = dialect.create_builder().select("[Id]").table("Users").order_by("[Id]").take("10")
    assert builder.to_sql() == "SELECT TOP (10) [Id] FROM [Users] ORDER BY [Id]"


def test_sqlserver_offset_fetch():
    dialect = SqlServerDialect()
    builder = (
        dialect.create_builder()
        .select("[Id]")
        .table("Users")
        .order_by_descending("[Id]")
        .skip("20")
        .take("10")
    )
    assert builder.to_sql() == (
        "SELECT [Id] FROM [Users] ORDER BY [Id] DESC OFFSET 20 ROWS FETCH NEXT 10 ROWS ONLY"
    )


def test_sqlserver_offset_without_order_orders_on_constant(caplog):
    caplog.set_level(logging.WARNING, logger="sqlweave.dialects.sqlserver")
    dialect = SqlServerDialect()
    builder = dialect.create_builder().select("[Id]").table("Users").skip("5")
    assert builder.to_sql() == "SELECT [Id] FROM [Users] ORDER BY (SELECT NULL) OFFSET 5 ROWS"
    assert any("without ORDER BY" in record.message for record in caplog.records)


def test_sqlserver_paging_can_require_order():
    dialect = SqlServerDialect(DialectSettings(require_order_for_paging=True))
    builder = dialect.create_builder().table("Users").take("5")
    with pytest.raises(MalformedInputError):
        builder.to_sql()


def test_sqlserver_concat_and_in():
    dialect = SqlServerDialect()
    assert dialect.concat_fragments(lambda w: w.write("[a]"), lambda w: w.write("[b]")) == "([a] + [b])"
    assert dialect.in_operator("@ids") == " IN @ids"
    assert dialect.not_in_operator("@a,@b") == " NOT IN (@a,@b) "


def test_sqlserver_identity_column_includes_type():
    dialect = SqlServerDialect()
    rendered = dialect.render_column_definition("Id", ScalarTypeTag.INT32, identity=True)
    assert rendered == "[Id] int IDENTITY(1,1) primary key"


def test_sqlserver_type_names():
    dialect = SqlServerDialect()
    assert dialect.type_name(ScalarTypeTag.STRING) == "nvarchar(255)"
    assert dialect.type_name(ScalarTypeTag.STRING, 5000) == "nvarchar(max)"
    assert dialect.type_name(ScalarTypeTag.BINARY, 8000) == "varbinary(8000)"
    assert dialect.type_name(ScalarTypeTag.OBJECT) == "varbinary(max)"
    assert dialect.type_name(ScalarTypeTag.GUID) == "uniqueidentifier"
    assert dialect.type_name(ScalarTypeTag.UINT64) == "decimal(20,0)"


def test_sqlserver_functions_and_drop_index():
    dialect = SqlServerDialect()
    assert dialect.render_function("Length", ["[Name]"]) == "LEN([Name])"
    assert dialect.render_function("now", []) == "getutcdate()"
    assert dialect.drop_index("IX_Name", "dbo.Users") == "drop index if exists [IX_Name] on [dbo].[Users]"
