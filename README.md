# tradovateimport

Reads the CSV reports that Tradovate produces and stores them in an SQLite
database, so that trades and cash movements can be queried with SQL.

## Installation

    pip install .

## Usage

    tradovateimport <data_dir> <db_filepath>

`data_dir` is walked recursively, in name order. Every file named
`performance.csv` or `cash.csv` is loaded into the table of the same name;
any other file is ignored. The database file name must end in `.db`; the
file is created if it does not exist. The command logs one line per loaded
file with the number of rows written, and exits with status 1 on a usage
error or a failed import.

Tables are created with `CREATE TABLE IF NOT EXISTS ... WITHOUT ROWID`, and
rows are written with `INSERT OR REPLACE` in batches of up to 100,000, so
loading an overlapping report again updates existing rows rather than
duplicating them.

### The `performance` table

One row per matched buy/sell pair, keyed on `symbol`, `buyFillId` and
`sellFillId`. Dollar amounts shown in parentheses, such as `$(12.50)`, are
stored as negative numbers (`-12.50`); timestamps in `MM/DD/YYYY HH:MM:SS`
form are stored as `YYYY-MM-DDTHH:MM:SSZ`; the `duration` column (for example
`1h 2min 3sec`, with units `d`, `h`, `min` and `sec`) is stored as a whole
number of seconds in `durationSeconds`.

### The `cash` table

One row per cash transaction, keyed on `account` and `transactionId`.
Thousands separators are removed from `delta` and `amount`, and timestamps
are converted as above.

Each CSV file must start with a header row that matches the expected columns
exactly, and every data row must have the same number of fields; otherwise
the import stops with an error.

## Library use

    from tradovateimport.cli import import_data_dir, import_data_file
    from tradovateimport.tables import table_for_kind

    import_data_dir("reports", "trades.db")
    rows = import_data_file(table_for_kind("cash"), "reports/cash.csv", "trades.db")

- `tradovateimport.tables` — `cash()`, `performance()` and
  `table_for_kind(kind)` return a `TableInfo` pairing CSV columns with
  database columns.
- `tradovateimport.csvdata` — `read_rows(columns, path)` yields `Row`
  objects after checking the header; `Row.clean()` applies each column's
  cleaners.
- `tradovateimport.cleaning` — the individual value cleaners, which raise
  `CleaningError` on bad input.
- `tradovateimport.db` — `create_table_sql` and `insert_rows_sql` build the
  SQL statements that the importer runs.

Errors during an import are raised as `tradovateimport.cli.DataImportError`.

## What it does not do

The package only loads data. It offers no way to query, report on or remove
what is in the database; use any SQLite client for that.

## Running the tests

    pip install ".[test]"
    pytest