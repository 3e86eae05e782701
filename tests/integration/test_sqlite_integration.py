import datetime
import decimal
import sqlite3

import pytest

from sqlweave import ScalarTypeTag, SQLiteDialect

dialect = SQLiteDialect()


@pytest.fixture()
def connection():
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


def _create_schema(conn):
    users = dialect.create_table(
        "Users",
        [
            dialect.render_column_definition("Id", ScalarTypeTag.INT64, identity=True),
            dialect.render_column_definition("Name", ScalarTypeTag.STRING, nullable=False),
            dialect.render_column_definition("Score", ScalarTypeTag.DECIMAL),
            dialect.render_column_definition("Joined", ScalarTypeTag.DATETIME),
        ],
    )
    fk = dialect.add_foreign_key_constraint(
        "FK_Posts_Users", ['"UserId"'], '"Users"', [], primary_key=True
    )
    posts = dialect.create_table(
        "Posts",
        [
            dialect.render_column_definition("Id", ScalarTypeTag.INT64, identity=True),
            dialect.render_column_definition("UserId", ScalarTypeTag.INT64),
            fk.strip(),
        ],
    )
    conn.execute(users)
    conn.execute(posts)


def _insert_user(conn, name, score, joined):
    values = ", ".join(dialect.sql_value(value) for value in (name, score, joined))
    conn.execute(f'insert into "Users" ("Name", "Score", "Joined") values ({values})')


def test_generated_ddl_and_literals_execute(connection):
    _create_schema(connection)
    joined = datetime.datetime(2024, 5, 1, 12, 0)
    _insert_user(connection, "O'Brien", decimal.Decimal("12.50"), joined)
    _insert_user(connection, "Smith", 3.5, None)

    rows = connection.execute('select "Name", "Joined" from "Users" order by "Id"').fetchall()
    assert rows == [("O'Brien", "2024-05-01 12:00:00"), ("Smith", None)]


def test_builder_paging_and_in_operator(connection):
    _create_schema(connection)
    for index in range(10):
        _insert_user(connection, f"user{index}", index, None)

    sql = (
        dialect.create_builder()
        .select('"Name"')
        .table("Users")
        .where('"Id"' + dialect.in_operator(", ".join(str(i) for i in range(1, 9))))
        .order_by('"Id"')
        .skip("2")
        .take("3")
        .to_sql()
    )
    names = [row[0] for row in connection.execute(sql).fetchall()]
    assert names == ["user2", "user3", "user4"]

    placeholder = dialect.parameter_placeholder("id")
    sql = dialect.create_builder().select('"Name"').table("Users").where(
        '"Id"' + dialect.in_operator(placeholder)
    ).to_sql()
    assert connection.execute(sql, {"id": 1}).fetchall() == [("user0",)]


def test_distinct_with_order_executes(connection):
    _create_schema(connection)
    for name in ("b", "a", "b"):
        _insert_user(connection, name, 1, None)

    sql = (
        dialect.create_builder()
        .select('"Name"')
        .table("Users")
        .distinct()
        .order_by_descending('"Name"')
        .to_sql()
    )
    assert connection.execute(sql).fetchall() == [("b",), ("a",)]


def test_functions_concat_and_drop_statements(connection):
    _create_schema(connection)
    _insert_user(connection, "abc", 1, None)

    length = dialect.render_function("LEN", ['"Name"'])
    full = dialect.concat_fragments(
        lambda w: w.write('"Name"'), lambda w: w.write(dialect.sql_value("-")), lambda w: w.write(length)
    )
    row = connection.execute(f'select {full} from "Users"').fetchone()
    assert row == ("abc-3",)

    connection.execute('create index "IX_Users_Name" on "Users" ("Name")')
    connection.execute(dialect.drop_index("IX_Users_Name", "Users"))
    connection.execute(dialect.drop_table("Posts"))
    connection.execute(dialect.drop_table("Posts"))
    order = dialect.descriptor.random_order_by_clause
    assert connection.execute(f'select count(*) from "Users" order by {order}').fetchone() == (1,)
