"""Reading CSV exports and cleaning their rows column by column."""

from __future__ import annotations

import csv
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from os import PathLike

__all__ = ["CsvDataError", "CsvColumn", "Row", "read_rows"]

CleanFunc = Callable[[str], str]


class CsvDataError(Exception):
    """Raised when a CSV file cannot be read, validated or cleaned."""


@dataclass(frozen=True)
class CsvColumn:
    """A column expected in the CSV header and the cleaners applied to its values."""

    name: str
    clean_funcs: tuple[CleanFunc | None, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Row:
    """One data row of a CSV file together with its column definitions."""

    columns: Sequence[CsvColumn]
    data: Sequence[str]

    def clean(self) -> list[str]:
        """Run each column's cleaners in order and strip the results."""
        cleaned = []
        for col_num, (column, value) in enumerate(zip(self.columns, self.data)):
            for func in column.clean_funcs:
                if func is None:
                    continue
                try:
                    value = func(value)
                except ValueError as err:
                    raise CsvDataError(
                        f"failed to clean the value at column #{col_num}: {err}"
                    ) from err
            cleaned.append(value.strip())
        return cleaned


def _validate_header(columns: Sequence[CsvColumn], record: Sequence[str]) -> None:
    if len(record) != len(columns):
        raise CsvDataError(
            f"invalid header: header has {len(record)} columns, "
            f"but expected {len(columns)} columns"
        )
    for col_num, (column, name) in enumerate(zip(columns, record)):
        if name != column.name:
            raise CsvDataError(
                f"invalid header: header at column {col_num} was {name!r} "
                f"but expected {column.name!r}"
            )


def _records(handle) -> Iterator[tuple[int, list[str]]]:
    """Yield numbered non-empty records, wrapping parse errors."""
    reader = csv.reader(handle, strict=True)
    row_num = 0
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError) as err:
            raise CsvDataError(f"failed to read row #{row_num}: {err}") from err
        if not record:
            continue
        yield row_num, record
        row_num += 1


def read_rows(
    columns: Sequence[CsvColumn], path: str | PathLike[str]
) -> Iterator[Row]:
    """Yield the data rows of a CSV file after checking its header against ``columns``."""
    columns = tuple(columns)
    try:
        handle = open(path, newline="", encoding="utf-8")
    except OSError as err:
        raise CsvDataError(f"failed to read {str(path)!r}: {err}") from err

    with handle:
        for row_num, record in _records(handle):
            if row_num == 0:
                _validate_header(columns, record)
                continue
            if len(record) != len(columns):
                raise CsvDataError(
                    f"failed to read row #{row_num}: wrong number of fields "
                    f"(expected {len(columns)}, found {len(record)})"
                )
            yield Row(columns, record)