"""Functions that normalise raw values exported in CSV files."""

from __future__ import annotations

import re
from datetime import datetime

__all__ = [
    "CleaningError",
    "clean_noop",
    "trim_spaces",
    "clean_timestamp",
    "clean_duration_as_seconds",
    "remove_commas",
    "remove_negative_parens_from_currency",
]


class CleaningError(ValueError):
    """Raised when a value cannot be cleaned."""


_TIMESTAMP_PATTERN = re.compile(
    r"(\d{2})/(\d{2})/(\d{4}) (\d{1,2}):(\d{2}):(\d{2})(?:[.,]\d+)?"
)

_DURATION_SEGMENT = re.compile(r"([0-9.]+)([a-zA-Z]+)")

# unit -> (friendly name, seconds per unit)
_DURATION_UNITS: dict[str, tuple[str, int]] = {
    "sec": ("seconds", 1),
    "min": ("minutes", 60),
    "h": ("hours", 60 * 60),
    "d": ("days", 24 * 60 * 60),
}

_MAX_SEGMENT_VALUE = 2**15 - 1


def clean_noop(value: str) -> str:
    """Return the value unchanged, rejecting anything that is not a string."""
    if not isinstance(value, str):
        raise TypeError(f"expected a string value, got {type(value).__name__}")
    return value


def trim_spaces(value: str) -> str:
    """Strip leading and trailing whitespace."""
    return value.strip()


def clean_timestamp(value: str) -> str:
    """Convert an ``MM/DD/YYYY HH:MM:SS`` timestamp to RFC 3339 in UTC."""
    match = _TIMESTAMP_PATTERN.fullmatch(value)
    if match is None:
        raise CleaningError(
            f"failed to clean timestamp: {value!r} does not match MM/DD/YYYY HH:MM:SS"
        )
    month, day, year, hour, minute, second = (int(part) for part in match.groups())
    try:
        moment = datetime(year, month, day, hour, minute, second)
    except ValueError as err:
        raise CleaningError(f"failed to clean timestamp {value!r}: {err}") from err
    return f"{moment:%Y-%m-%dT%H:%M:%S}Z"


def clean_duration_as_seconds(duration: str) -> str:
    """Convert a duration such as ``1h 5min 3sec`` to a whole number of seconds."""
    if duration == "":
        return "0"

    total = 0
    seen_units: set[str] = set()
    for segment in duration.split(" "):
        match = _DURATION_SEGMENT.fullmatch(segment)
        if match is None:
            raise CleaningError(
                f"segment {segment!r} is not a number followed by a unit in duration: {duration}"
            )
        value_text, unit = match.groups()

        if unit not in _DURATION_UNITS:
            raise CleaningError(
                f"unexpected unit {unit!r} in segment {segment!r}: {duration}"
            )
        friendly_name, multiplier = _DURATION_UNITS[unit]
        if unit in seen_units:
            raise CleaningError(
                f"duplicate unit {friendly_name!r} found in segment {segment!r}: {duration}"
            )
        seen_units.add(unit)

        if not value_text.isdigit() or int(value_text) > _MAX_SEGMENT_VALUE:
            raise CleaningError(
                f"invalid value {value_text!r} in segment {segment!r}: {duration}"
            )
        total += int(value_text) * multiplier

    return str(total)


def remove_commas(value: str) -> str:
    """Remove every comma, e.g. thousands separators."""
    return value.replace(",", "")


def remove_negative_parens_from_currency(value: str) -> str:
    """Drop a leading ``$`` and turn an amount wrapped in parentheses negative."""
    cleaned = value.removeprefix("$")

    found_prefix = cleaned.startswith("(")
    cleaned = cleaned.removeprefix("(")
    found_suffix = cleaned.endswith(")")
    cleaned = cleaned.removesuffix(")")

    if found_prefix and found_suffix:
        return "-" + cleaned
    return cleaned