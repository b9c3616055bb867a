"""Import exported CSV files from a directory tree into an SQLite database."""

from __future__ import annotations

import logging
import os
import sqlite3
import sys
from collections.abc import Iterator, Sequence
from contextlib import closing
from os import PathLike

from .csvdata import CsvDataError, read_rows
from .db import StatementError, create_table_sql, insert_rows_sql
from .tables import TableInfo, table_for_kind

__all__ = ["DataImportError", "import_data_dir", "import_data_file", "main"]

SQL_INSERT_BATCH_SIZE = 100_000

logger = logging.getLogger(__name__)


class DataImportError(Exception):
    """Raised when data cannot be imported into the database."""


def _walk(root: str) -> Iterator[tuple[str, str]]:
    """Yield ``(path, name)`` for ``root`` and everything under it, in lexical order."""
    try:
        is_dir = os.path.isdir(root) and not os.path.islink(root)
        if not is_dir:
            os.lstat(root)
    except OSError as err:
        raise DataImportError(f"failed to visit path {root!r}: {err}") from err
    yield root, os.path.basename(os.path.normpath(root))
    if is_dir:
        yield from _walk_children(root)


def _walk_children(directory: str) -> Iterator[tuple[str, str]]:
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError as err:
        raise DataImportError(f"failed to visit path {directory!r}: {err}") from err
    for entry in entries:
        yield entry.path, entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_children(entry.path)


def import_data_dir(data_dir: str | PathLike[str], db_path: str | PathLike[str]) -> None:
    """Import every known CSV file found under ``data_dir`` into the database."""
    try:
        for path, name in _walk(os.fspath(data_dir)):
            if not name.endswith(".csv"):
                continue
            table = table_for_kind(name[: -len(".csv")])
            if table is None:
                continue
            try:
                import_data_file(table, path, db_path)
            except DataImportError as err:
                raise DataImportError(
                    f"failed to import data file {path!r}: {err}"
                ) from err
    except DataImportError as err:
        raise DataImportError(
            f"failed while traversing data directory: {err}"
        ) from err


def _insert_batch(
    conn: sqlite3.Connection, table: TableInfo, batch: Sequence[Sequence[str]]
) -> None:
    try:
        statement = insert_rows_sql(table.db_columns(), table.name, batch) + "\n"
    except StatementError as err:
        raise DataImportError(f'failed to generate "INSERT" statement: {err}') from err
    logger.debug(statement)
    try:
        conn.execute(statement)
    except sqlite3.Error as err:
        raise DataImportError(f'failed to execute "INSERT" statement: {err}') from err


def import_data_file(
    table: TableInfo,
    data_path: str | PathLike[str],
    db_path: str | PathLike[str],
) -> int:
    """Create the table if needed, insert the file's cleaned rows and return their count."""
    data_name = os.fspath(data_path)
    try:
        conn = sqlite3.connect(os.fspath(db_path), isolation_level=None)
    except sqlite3.Error as err:
        raise DataImportError(f"failed to open database: {err}") from err

    with closing(conn):
        create_statement = create_table_sql(table.db_columns(), table.name) + "\n"
        logger.debug(create_statement)
        try:
            conn.execute(create_statement)
        except sqlite3.Error as err:
            raise DataImportError(
                f'failed to execute "CREATE TABLE" statement: {err}'
            ) from err

        csv_columns = table.csv_columns()
        try:
            num_rows = sum(1 for _ in read_rows(csv_columns, data_name))
            batch: list[list[str]] = []
            for row_num, row in enumerate(read_rows(csv_columns, data_name)):
                try:
                    cleaned = row.clean()
                except CsvDataError as err:
                    raise DataImportError(
                        f"failed to clean row #{row_num}: {err}"
                    ) from err
                batch.append(cleaned)
                if len(batch) == SQL_INSERT_BATCH_SIZE:
                    _insert_batch(conn, table, batch)
                    batch = []
            if batch:
                _insert_batch(conn, table, batch)
        except CsvDataError as err:
            raise DataImportError(f"failed to read file {data_name!r}: {err}") from err

    logger.info("Wrote %d rows to table %r: %s", num_rows, table.name, data_name)
    return num_rows


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the importer: ``<data_dir> <db_filepath>``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    logger.setLevel(logging.INFO)

    if len(args) != 2:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tradovateimport"
        logger.error("Usage: %s <data_dir> <db_filepath>", program)
        return 1

    data_dir, db_path = args
    if _extension(db_path) != ".db":
        logger.error('Output filepath must have an extension of ".db".')
        return 1

    try:
        import_data_dir(data_dir, db_path)
    except DataImportError as err:
        logger.error("failed to import data from %r: %s", data_dir, err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())