import pytest

from sqlweave import (
    MySQLDialect,
    PostgresDialect,
    ScalarTypeTag,
    SQLiteDialect,
    SqlServerDialect,
    UnsupportedOperationError,
    get_dialect,
    register_dialect,
)

from example_dialect import ExampleDialect

CONCRETE_DIALECTS = [SQLiteDialect, PostgresDialect, MySQLDialect, SqlServerDialect]


def test_get_dialect_by_name():
    assert isinstance(get_dialect("sqlite"), SQLiteDialect)
    assert isinstance(get_dialect("POSTGRES"), PostgresDialect)
    assert isinstance(get_dialect("mssql"), SqlServerDialect)


def test_get_dialect_unknown_name():
    with pytest.raises(UnsupportedOperationError):
        get_dialect("oracle")


def test_register_dialect():
    register_dialect("Example", ExampleDialect)
    assert isinstance(get_dialect("example"), ExampleDialect)


@pytest.mark.parametrize("dialect_cls", CONCRETE_DIALECTS)
@pytest.mark.parametrize("tag", list(ScalarTypeTag))
def test_every_tag_has_a_type_name(dialect_cls, tag):
    assert dialect_cls().type_name(tag, 50)


@pytest.mark.parametrize("dialect_cls", CONCRETE_DIALECTS)
def test_paging_without_bounds_is_a_no_op(dialect_cls):
    dialect = dialect_cls()
    builder = dialect.create_builder().table("t")
    before = builder.to_sql()
    dialect.page(builder, None, None)
    assert builder.to_sql() == before


@pytest.mark.parametrize("dialect_cls", CONCRETE_DIALECTS)
def test_dialect_instances_do_not_share_registries(dialect_cls):
    first, second = dialect_cls(), dialect_cls()
    assert first.functions is not second.functions
    assert first.functions.frozen and second.functions.frozen
