"""CSV codec turning storage text into typed row mappings and back."""

from __future__ import annotations

import csv
import io
import math
from typing import Any, Dict, List, Mapping, Sequence

from robot_booking.enterprise.core import FormatError


def cast_cell(text: str) -> Any:
    """Return ``text`` as an ``int`` or ``float`` when it is written canonically.

    Only values that render back to the exact same text are converted, so
    ``"007"`` or ``"1e3"`` stay strings and a parse/stringify cycle is lossless.
    """

    for kind in (int, float):
        try:
            value = kind(text)
        except ValueError:
            continue
        if math.isfinite(value) and str(value) == text:
            return value
    return text


def render_cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class CsvCodec:
    """Stateless CSV reader/writer for uniform row mappings."""

    def __init__(self, delimiter: str = ",") -> None:
        self.delimiter = delimiter

    def parse(self, text: str) -> List[Dict[str, Any]]:
        """Parse ``text`` into one mapping per data row, keyed by the header."""

        try:
            rows = [row for row in csv.reader(io.StringIO(text), delimiter=self.delimiter) if row]
        except csv.Error as exc:
            raise FormatError(f"unreadable CSV: {exc}") from exc

        if not rows:
            return []

        header, *body = rows
        records: List[Dict[str, Any]] = []
        for line_no, row in enumerate(body, start=2):
            if len(row) != len(header):
                raise FormatError(
                    f"row {line_no} has {len(row)} columns, header has {len(header)}"
                )
            records.append({name: cast_cell(cell) for name, cell in zip(header, row)})
        return records

    def stringify(self, records: Sequence[Mapping[str, Any]]) -> str:
        """Render ``records`` as CSV using the first record's keys as header."""

        if not records:
            return ""

        header = list(records[0].keys())
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter, lineterminator="\n")
        writer.writerow(header)
        for index, record in enumerate(records):
            missing = [name for name in header if name not in record]
            if missing:
                raise FormatError(f"record {index} lacks columns {missing}")
            writer.writerow([render_cell(record[name]) for name in header])
        return buffer.getvalue()
