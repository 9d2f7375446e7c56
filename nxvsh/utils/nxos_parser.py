"""Utilities for parsing NX-OS VSH output."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from nxvsh.errors import MalformedPayloadError, ParseError


# ---------------------------------------------------------------------------
# startup-config presence
# ---------------------------------------------------------------------------

NO_STARTUP_CONFIG = "No startup configuration"


def has_startup_config(output: str) -> bool:
    """Return False when 'show startup-config' reports no configuration."""
    return NO_STARTUP_CONFIG not in output


# ---------------------------------------------------------------------------
# Configuration timestamps  ("Mon Jun 28 13:22:05 2021")
# ---------------------------------------------------------------------------

WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_CONFIG_TIME_RE = re.compile(
    r"^(?P<dow>[A-Za-z]{3})\s+(?P<mon>[A-Za-z]{3})\s+(?P<day>\d{1,2})\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})\s+(?P<year>\d{4})$",
    re.ASCII,
)
TIME_LINE_DELIMITER = ": "


def parse_config_timestamp(text: str) -> datetime:
    """Parse a 'Dow Mon D HH:MM:SS YYYY' timestamp as UTC wall-clock time.

    The day may be space-padded or unpadded. The weekday must agree with
    the date.
    """
    value = text.strip()
    m = _CONFIG_TIME_RE.match(value)
    if not m:
        raise ParseError(f"timestamp does not match 'Dow Mon D HH:MM:SS YYYY': {value!r}")

    dow, mon = m.group("dow"), m.group("mon")
    if mon not in MONTHS:
        raise ParseError(f"unknown month {mon!r} in {value!r}")
    if dow not in WEEKDAYS:
        raise ParseError(f"unknown weekday {dow!r} in {value!r}")

    try:
        parsed = datetime(
            int(m.group("year")),
            MONTHS.index(mon) + 1,
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise ParseError(f"out-of-range value in {value!r}: {exc}") from exc

    if WEEKDAYS[parsed.weekday()] != dow:
        raise ParseError(
            f"weekday {dow!r} does not match {parsed.date().isoformat()} in {value!r}",
        )
    return parsed


def format_config_timestamp(value: datetime) -> str:
    """Render *value* in the startup-config time layout (day space-padded)."""
    return (
        f"{WEEKDAYS[value.weekday()]} {MONTHS[value.month - 1]} {value.day:>2} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d} {value.year:04d}"
    )


def extract_date_from_time_line(line: str) -> datetime:
    """Extract the timestamp from a '!Time: <timestamp>' configuration line."""
    _, sep, rest = line.partition(TIME_LINE_DELIMITER)
    if not sep:
        raise ParseError(f"no {TIME_LINE_DELIMITER!r} delimiter in time line {line.strip()!r}")
    return parse_config_timestamp(rest)


# ---------------------------------------------------------------------------
# JSON table extraction  ({"TABLE_x": {"ROW_x": [...]}})
# ---------------------------------------------------------------------------

def extract_table_rows(
    payload: Any,
    table_key: str,
    row_key: str,
) -> list[dict[str, Any]]:
    """Return the rows nested under *table_key* / *row_key*.

    A missing table or row key yields an empty list. A single row object is
    returned as a one-element list.
    """
    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"expected a JSON object, got {type(payload).__name__}",
        )
    table = payload.get(table_key)
    if table is None:
        return []
    if not isinstance(table, dict):
        raise MalformedPayloadError(
            f"{table_key} is a {type(table).__name__}, expected an object",
        )

    rows = table.get(row_key)
    if rows is None:
        return []
    if isinstance(rows, dict):
        return [rows]
    if not isinstance(rows, list):
        raise MalformedPayloadError(
            f"{table_key}.{row_key} is a {type(rows).__name__}, expected a list",
        )
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise MalformedPayloadError(
                f"{table_key}.{row_key}[{index}] is a {type(row).__name__}, expected an object",
            )
    return rows
