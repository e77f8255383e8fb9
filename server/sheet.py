"""
Agri GDP Live — Sheet parsing
Turns the Google Sheets CSV export into a (year, value) series.
"""

import csv
import io
import math
import re
from dataclasses import dataclass, field

import config

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class SheetError(Exception):
    """Raised when the sheet can't be fetched or holds no usable data."""


@dataclass
class Series:
    years: list = field(default_factory=list)
    values: list = field(default_factory=list)

    def __len__(self):
        return len(self.years)

    def points(self):
        return list(zip(self.years, self.values))


def csv_url(sheet_id=None, gid=None):
    """Build the public CSV export URL for a sheet tab."""
    sheet_id = sheet_id or config.SHEET_ID
    gid = gid or config.SHEET_GID
    return (
        f"https://docs.google.com/spreadsheets/d/{sheet_id}"
        f"/export?format=csv&gid={gid}"
    )


# ═══════════════════════════════════════
# CSV
# ═══════════════════════════════════════

def parse_csv(text):
    """Parse CSV text into a list of dicts keyed by the header row.

    Quoted fields may hold commas and "" escapes. Blank lines are skipped,
    every value is trimmed, and short rows are padded with "".
    """
    rows = [row for row in csv.reader(io.StringIO(text, newline="")) if row]
    if not rows:
        return []

    headers = [h.strip() for h in rows[0]]
    records = []
    for row in rows[1:]:
        record = {}
        for i, header in enumerate(headers):
            record[header] = row[i].strip() if i < len(row) else ""
        records.append(record)
    return records


def parse_year(value):
    """Leading-integer parse: '1961', '1961.0' and ' 1961x' all give 1961."""
    m = _LEADING_INT.match(value or "")
    return int(m.group(1)) if m else None


def parse_value(value):
    """Leading-decimal parse ('3.25%' gives 3.25). None unless finite."""
    m = _LEADING_FLOAT.match(value or "")
    if not m:
        return None
    number = float(m.group(1))
    return number if math.isfinite(number) else None


def extract_series(rows, year_column=None, value_column=None):
    """Keep rows whose year and value both parse, in sheet order."""
    year_column = year_column or config.YEAR_COLUMN
    value_column = value_column or config.VALUE_COLUMN

    series = Series()
    for row in rows:
        year = parse_year(row.get(year_column, ""))
        value = parse_value(row.get(value_column, ""))
        if year is None or value is None:
            continue
        series.years.append(year)
        series.values.append(value)
    return series


def load_series(text):
    """Parse a CSV export and extract the series, or raise SheetError."""
    try:
        rows = parse_csv(text)
    except csv.Error as e:
        raise SheetError(f"Failed to parse CSV: {e}") from e
    if not rows:
        raise SheetError("No data rows in CSV.")
    series = extract_series(rows)
    if not series.years:
        raise SheetError("No valid Year/Value pairs found.")
    return series
