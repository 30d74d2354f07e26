"""CSV parsing for passenger imports.

The format is deliberately naive: one header line (not validated), comma
separated values, no quoting or escaping. Columns are mapped by position.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Column:
    name: str
    default: str | None = None


PASSENGER_COLUMNS: tuple[Column, ...] = (
    Column("first_name", ""),
    Column("last_name", ""),
    Column("email", ""),
    Column("phone"),
    Column("passport_number"),
    Column("nationality"),
    Column("date_of_birth"),
    Column("seat_number"),
    Column("flight_number", ""),
    Column("departure_city", ""),
    Column("arrival_city", ""),
    Column("departure_date", ""),
    Column("ticket_class"),
    Column("price"),
    Column("status", "confirmed"),
)


def parse_csv(text: str, columns: tuple[Column, ...] = PASSENGER_COLUMNS) -> list[dict[str, Any]]:
    """Split ``text`` into row mappings keyed by column name.

    Blank lines are skipped. A missing or empty value falls back to the
    column default; extra values beyond the mapped columns are ignored.
    """
    lines = text.strip().split("\n")
    rows: list[dict[str, Any]] = []
    for line in lines[1:]:
        line = line.rstrip("\r")
        if not line.strip():
            continue
        values = line.split(",")
        row = {}
        for position, column in enumerate(columns):
            value = values[position] if position < len(values) else ""
            row[column.name] = value or column.default
        rows.append(row)
    return rows
