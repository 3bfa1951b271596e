# filters.py
"""
Filter Engine for GUDID Chronicles

Narrows a record collection by supplier, device, and an inclusive date range.
Empty criteria are wildcards; all criteria are ANDed; input order is kept.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Tuple

from .records import Record, parse_date


@dataclass(frozen=True)
class FilterCriteria:
    """
    User-selected constraints. Empty supplier/device and None dates mean
    "no restriction". Date bounds may also be passed as text ("" = unbounded).
    """
    supplier: str = ""
    device: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self):
        object.__setattr__(self, "supplier", self.supplier or "")
        object.__setattr__(self, "device", self.device or "")
        object.__setattr__(self, "start_date", parse_date(self.start_date))
        object.__setattr__(self, "end_date", parse_date(self.end_date))

    @property
    def has_date_bounds(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    @property
    def is_wildcard(self) -> bool:
        return not self.supplier and not self.device and not self.has_date_bounds


def _date_matches(deliver_date: Optional[date], criteria: FilterCriteria) -> bool:
    if not criteria.has_date_bounds:
        return True
    # Undated records cannot satisfy an active range
    if deliver_date is None:
        return False
    if criteria.start_date is not None and deliver_date < criteria.start_date:
        return False
    if criteria.end_date is not None and deliver_date > criteria.end_date:
        return False
    return True


def matches(record: Record, criteria: FilterCriteria) -> bool:
    """True when the record satisfies every active criterion."""
    if criteria.supplier and record.supplier_name != criteria.supplier:
        return False
    if criteria.device and record.device_name != criteria.device:
        return False
    return _date_matches(record.deliver_date, criteria)


def filter_records(records: Sequence[Record], criteria: FilterCriteria) -> List[Record]:
    """Return the matching records as a new list, in input order."""
    if criteria.is_wildcard:
        return list(records)
    return [r for r in records if matches(r, criteria)]


def filter_options(records: Sequence[Record]) -> Tuple[List[str], List[str]]:
    """
    Sorted distinct non-empty suppliers and devices, for the filter select boxes.
    Computed from the full collection so options don't vanish as filters narrow.
    """
    suppliers = sorted({r.supplier_name for r in records if r.supplier_name})
    devices = sorted({r.device_name for r in records if r.device_name})
    return suppliers, devices
