"""
gudid_utils/records.py

Parse delimited packing-list text into Record objects.

Column mapping is driven by the header row, so reordered or extra columns
parse the same way. Messy input degrades instead of failing:
- non-numeric / empty / negative quantity -> 0
- unparseable, missing or year/month-only date -> None
- blank, unreadable and too-short lines -> skipped
- quantities too large for an int64 -> 0

Usage:
    from gudid_utils.records import parse_records

    records = parse_records(csv_text)
    total = sum(r.quantity for r in records)
"""

import csv
import io
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterator, List, Optional, Sequence

import pandas as pd

from .config import (
    COL_CUSTOMER,
    COL_DELIVER_DATE,
    COL_DEVICE,
    COL_MODEL,
    COL_QUANTITY,
    COL_SUPPLIER,
    COLUMN_FIELD_MAP,
    DEFAULT_DELIMITER,
    RECOGNIZED_COLUMNS,
)
from .sample_data import SAMPLE_CSV

logger = logging.getLogger(__name__)

TEXT_COLUMNS = [COL_SUPPLIER, COL_CUSTOMER, COL_DEVICE, COL_MODEL]

# Quantities at or above this do not fit an int64 and are treated as invalid.
QUANTITY_CEILING = 2.0 ** 63

# Year-only and month-level values; pandas would pin these to the 1st.
PARTIAL_DATE_PATTERNS = [
    re.compile(r"^\d{4}$"),
    re.compile(r"^\d{4}[-/.]\d{1,2}$"),
    re.compile(r"^\d{1,2}[-/.]\d{4}$"),
    re.compile(r"^[A-Za-z]+\.?,?\s+\d{4}$"),
    re.compile(r"^\d{4},?\s+[A-Za-z]+\.?$"),
]


@dataclass(frozen=True)
class Record:
    """One packing-list line item."""
    supplier_name: str = ""
    deliver_date: Optional[date] = None
    customer: str = ""
    device_name: str = ""
    quantity: int = 0
    model_number: str = ""

    def to_dict(self) -> Dict:
        """Row dict keyed by the input column names."""
        return {
            COL_SUPPLIER: self.supplier_name,
            COL_DELIVER_DATE: self.deliver_date,
            COL_CUSTOMER: self.customer,
            COL_DEVICE: self.device_name,
            COL_QUANTITY: self.quantity,
            COL_MODEL: self.model_number,
        }


# =============================================================================
# Field Coercion
# =============================================================================

def coerce_quantity(series: pd.Series) -> pd.Series:
    """Coerce a text series to non-negative ints; anything invalid becomes 0."""
    nums = pd.to_numeric(series.astype(str).str.strip(), errors="coerce").astype("float64")
    nums = nums.where((nums >= 0) & (nums < QUANTITY_CEILING))
    return nums.fillna(0).astype("int64")


def parse_date(value) -> Optional[date]:
    """
    Parse one date value. Accepts date / datetime objects and text in any
    format pandas understands. Returns None for empty or unparseable input.

    Text without a digit is rejected up front so words like "today" never
    resolve against the clock. Year-only and month-level values ("2024",
    "2024-01", "Jan 2024") are rejected rather than pinned to the 1st.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text or not any(ch.isdigit() for ch in text):
        return None
    if any(p.match(text) for p in PARTIAL_DATE_PATTERNS):
        return None

    try:
        ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, OverflowError, TypeError):
        return None
    if pd.isna(ts):
        return None
    return ts.date()


def _is_blank(fields: List[str]) -> bool:
    return not fields or (len(fields) == 1 and not fields[0].strip())


def _clean_header(fields: List[str]) -> List[str]:
    header = [f.strip() for f in fields]
    if header:
        header[0] = header[0].lstrip("\ufeff").strip()
    return header


# =============================================================================
# Parsing
# =============================================================================

def _read_rows(text: str, delimiter: str) -> Iterator[Optional[List[str]]]:
    """Yield tokenized rows; a row the csv module rejects yields None."""
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    while True:
        try:
            fields = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            logger.debug(f"Unreadable line {reader.line_num}: {e}")
            yield None
            continue
        yield fields


def parse_records(text: str, delimiter: str = DEFAULT_DELIMITER) -> List[Record]:
    """
    Parse delimited text with a header row into Records, preserving input order.

    The first non-blank line is the header. Recognized columns are matched by
    exact (case-sensitive) name; the first occurrence wins if a name repeats.
    """
    if not text or not text.strip():
        return []

    header: Optional[List[str]] = None
    rows: List[List[str]] = []
    skipped = 0

    for fields in _read_rows(text, delimiter):
        if fields is None:
            skipped += 1
            continue
        if header is None:
            if not _is_blank(fields):
                header = _clean_header(fields)
            continue
        if _is_blank(fields) or len(fields) < len(header):
            skipped += 1
            continue
        rows.append(fields)

    if skipped:
        logger.debug(f"Skipped {skipped} blank, short or unreadable line(s)")

    if header is None or not rows:
        return []

    positions: Dict[str, int] = {}
    for idx, name in enumerate(header):
        if name in COLUMN_FIELD_MAP and name not in positions:
            positions[name] = idx

    frame = pd.DataFrame(
        {name: [row[idx] for row in rows] for name, idx in positions.items()},
        index=range(len(rows)),
    ).reindex(columns=RECOGNIZED_COLUMNS, fill_value="")

    for col in TEXT_COLUMNS:
        frame[col] = frame[col].astype(str).str.strip()

    quantities = coerce_quantity(frame[COL_QUANTITY]).tolist()
    dates = [parse_date(v) for v in frame[COL_DELIVER_DATE]]

    return [
        Record(
            supplier_name=supplier,
            deliver_date=deliver_date,
            customer=customer,
            device_name=device,
            quantity=int(quantity),
            model_number=model,
        )
        for supplier, deliver_date, customer, device, quantity, model in zip(
            frame[COL_SUPPLIER],
            dates,
            frame[COL_CUSTOMER],
            frame[COL_DEVICE],
            quantities,
            frame[COL_MODEL],
        )
    ]


def decode_upload(data: bytes) -> str:
    """Decode uploaded file bytes; a BOM is dropped and bad bytes replaced."""
    return data.decode("utf-8-sig", errors="replace")


def load_sample_records() -> List[Record]:
    return parse_records(SAMPLE_CSV)


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Tabular view of records in the input column vocabulary."""
    if not records:
        return pd.DataFrame(columns=RECOGNIZED_COLUMNS)
    return pd.DataFrame([r.to_dict() for r in records]).reindex(columns=RECOGNIZED_COLUMNS)
