import sqlite3

import pytest

from tradovateimport.db import (
    ColumnType,
    DbColumn,
    StatementError,
    create_table_sql,
    insert_rows_sql,
)

CASH_COLUMNS = (
    DbColumn("account", ColumnType.STRING, primary_key=True),
    DbColumn("delta", ColumnType.DOUBLE),
)


def test_create_table_exact_statement():
    assert create_table_sql(CASH_COLUMNS, "cash") == (
        "CREATE TABLE IF NOT EXISTS cash (\n"
        "  account STRING,\n"
        "  delta DOUBLE,\n"
        "  PRIMARY KEY(account)) WITHOUT ROWID;"
    )


def test_create_table_multiple_primary_keys_in_order():
    columns = (
        DbColumn("symbol", ColumnType.STRING, primary_key=True),
        DbColumn("quantity", ColumnType.DOUBLE),
        DbColumn("buyFillId", ColumnType.STRING, primary_key=True),
    )
    sql = create_table_sql(columns, "performance")
    assert sql.endswith("  PRIMARY KEY(symbol, buyFillId)) WITHOUT ROWID;")


def test_create_table_without_primary_key():
    columns = (DbColumn("a", ColumnType.INT), DbColumn("b", ColumnType.DATE))
    sql = create_table_sql(columns, "t")
    assert "PRIMARY KEY" not in sql
    assert sql.startswith("CREATE TABLE IF NOT EXISTS t (\n")


def test_create_table_uses_type_names():
    columns = (
        DbColumn("durationSeconds", ColumnType.UNSIGNED_BIG_INT, primary_key=True),
        DbColumn("soldTimestamp", ColumnType.DATETIME),
    )
    sql = create_table_sql(columns, "t")
    assert "  durationSeconds UNSIGNED BIG INT,\n" in sql
    assert "  soldTimestamp DATETIME" in sql


def test_insert_no_rows_is_empty():
    assert insert_rows_sql(CASH_COLUMNS, "cash", []) == ""


def test_insert_single_row_exact():
    assert (
        insert_rows_sql(CASH_COLUMNS, "cash", [["ACC-A", "1.5"]])
        == 'INSERT OR REPLACE INTO cash VALUES \n  ("ACC-A", "1.5");'
    )


def test_insert_multiple_rows_separated_by_commas():
    rows = [["A", "1"], ["B", "2"], ["C", "3"]]
    sql = insert_rows_sql(CASH_COLUMNS, "cash", rows)
    lines = sql.splitlines()
    assert len(lines) == 1 + len(rows)
    assert all(line.endswith("),") for line in lines[1:-1])
    assert lines[-1].endswith(");")


def test_insert_wrong_value_count():
    with pytest.raises(StatementError, match="has 2 columns, but only 1 values"):
        insert_rows_sql(CASH_COLUMNS, "cash", [["A", "1"], ["B"]])


def test_statements_round_trip_through_sqlite():
    rows = [["ACC-A", "1.5"], ["ACC-B", "-2"], ["ACC-A", "3"]]
    with sqlite3.connect(":memory:") as conn:
        conn.execute(create_table_sql(CASH_COLUMNS, "cash"))
        conn.execute(insert_rows_sql(CASH_COLUMNS, "cash", rows))
        stored = conn.execute(
            "SELECT account, delta FROM cash ORDER BY account"
        ).fetchall()
    assert stored == [("ACC-A", 3.0), ("ACC-B", -2.0)]


def test_create_table_is_idempotent():
    sql = create_table_sql(CASH_COLUMNS, "cash")
    with sqlite3.connect(":memory:") as conn:
        conn.execute(sql)
        conn.execute(sql)
        names = [
            row[1] for row in conn.execute("PRAGMA table_info(cash)").fetchall()
        ]
    assert names == [column.name for column in CASH_COLUMNS]