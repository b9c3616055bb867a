"""Definitions of the exported tables: CSV columns paired with database columns."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .cleaning import (
    clean_duration_as_seconds,
    clean_timestamp,
    remove_commas,
    remove_negative_parens_from_currency,
    trim_spaces,
)
from .csvdata import CsvColumn
from .db import ColumnType, DbColumn

__all__ = ["TableColumn", "TableInfo", "cash", "performance", "table_for_kind"]


@dataclass(frozen=True)
class TableColumn:
    """A CSV input column and the database column it is stored in."""

    input_column: CsvColumn
    db_column: DbColumn


@dataclass(frozen=True)
class TableInfo:
    """A named table and its columns, in CSV order."""

    name: str
    columns: tuple[TableColumn, ...]

    def csv_columns(self) -> list[CsvColumn]:
        """The CSV columns in order."""
        return [column.input_column for column in self.columns]

    def db_columns(self) -> list[DbColumn]:
        """The database columns in order."""
        return [column.db_column for column in self.columns]


def _column(
    csv_name: str,
    db_name: str,
    data_type: ColumnType,
    *clean_funcs: Callable[[str], str],
    primary_key: bool = False,
) -> TableColumn:
    return TableColumn(
        input_column=CsvColumn(csv_name, tuple(clean_funcs)),
        db_column=DbColumn(db_name, data_type, primary_key),
    )


def cash() -> TableInfo:
    """The table of cash history exports."""
    return TableInfo(
        "cash",
        (
            _column("Account", "account", ColumnType.STRING, primary_key=True),
            _column(
                "Transaction ID", "transactionId", ColumnType.STRING, primary_key=True
            ),
            _column("Timestamp", "timestamp", ColumnType.DATETIME, clean_timestamp),
            _column("Date", "date", ColumnType.DATE),
            _column("Delta", "delta", ColumnType.DOUBLE, remove_commas),
            _column("Amount", "amount", ColumnType.DOUBLE, remove_commas),
            _column("Cash Change Type", "cashChangeType", ColumnType.STRING),
            _column("Currency", "currency", ColumnType.STRING),
            _column("Contract", "contract", ColumnType.STRING),
        ),
    )


def performance() -> TableInfo:
    """The table of trade performance exports."""
    return TableInfo(
        "performance",
        (
            _column("symbol", "symbol", ColumnType.STRING, primary_key=True),
            _column("_priceFormat", "priceFormat", ColumnType.INT),
            _column("_priceFormatType", "priceFormatType", ColumnType.INT),
            _column("_tickSize", "tickSize", ColumnType.DOUBLE),
            _column("buyFillId", "buyFillId", ColumnType.STRING, primary_key=True),
            _column("sellFillId", "sellFillId", ColumnType.STRING, primary_key=True),
            _column("qty", "quantity", ColumnType.DOUBLE),
            _column("buyPrice", "buyPrice", ColumnType.DOUBLE),
            _column("sellPrice", "sellPrice", ColumnType.DOUBLE),
            _column(
                "pnl", "pnl", ColumnType.DOUBLE, remove_negative_parens_from_currency
            ),
            _column(
                "boughtTimestamp",
                "boughtTimestamp",
                ColumnType.DATETIME,
                clean_timestamp,
            ),
            _column(
                "soldTimestamp", "soldTimestamp", ColumnType.DATETIME, clean_timestamp
            ),
            _column(
                "duration",
                "durationSeconds",
                ColumnType.UNSIGNED_BIG_INT,
                trim_spaces,
                clean_duration_as_seconds,
            ),
        ),
    )


_TABLES: dict[str, Callable[[], TableInfo]] = {
    "performance": performance,
    "cash": cash,
}


def table_for_kind(kind: str) -> TableInfo | None:
    """Return the table for a data file's base name, or ``None`` if it is unknown."""
    factory = _TABLES.get(kind)
    return factory() if factory is not None else None