"""Database column definitions and the SQL statements built from them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "ColumnType",
    "DbColumn",
    "StatementError",
    "create_table_sql",
    "insert_rows_sql",
]


class ColumnType(str, Enum):
    """SQLite column type names."""

    STRING = "STRING"
    INT = "INT"
    UNSIGNED_BIG_INT = "UNSIGNED BIG INT"
    DOUBLE = "DOUBLE"
    DATE = "DATE"
    DATETIME = "DATETIME"


@dataclass(frozen=True)
class DbColumn:
    """A column of a database table."""

    name: str
    data_type: ColumnType
    primary_key: bool = False


class StatementError(ValueError):
    """Raised when an SQL statement cannot be built."""


def create_table_sql(columns: Sequence[DbColumn], table_name: str) -> str:
    """Build a ``CREATE TABLE IF NOT EXISTS`` statement for a rowid-less table."""
    definitions = [
        f"  {column.name} {ColumnType(column.data_type).value}" for column in columns
    ]
    primary_keys = [column.name for column in columns if column.primary_key]
    if primary_keys:
        definitions.append(f"  PRIMARY KEY({', '.join(primary_keys)})")
    body = ",\n".join(definitions)
    return f"CREATE TABLE IF NOT EXISTS {table_name} (\n{body}) WITHOUT ROWID;"


def insert_rows_sql(
    columns: Sequence[DbColumn], table_name: str, rows: Sequence[Sequence[str]]
) -> str:
    """Build an ``INSERT OR REPLACE`` statement for the rows, or ``""`` if there are none."""
    if not rows:
        return ""

    values = []
    for row in rows:
        row_text = '"' + '", "'.join(row) + '"'
        if len(row) != len(columns):
            raise StatementError(
                f'table "{table_name}" has {len(columns)} columns, '
                f"but only {len(row)} values were provided: {row_text}"
            )
        values.append(f"\n  ({row_text})")

    return f"INSERT OR REPLACE INTO {table_name} VALUES {','.join(values)};"