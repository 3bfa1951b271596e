# aggregation.py
"""
Aggregation Engine for GUDID Chronicles

Single source of truth for the summary tiles, the delivery time series, and
the top-device ranking. Always returns a structurally valid result, including
for an empty collection.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List, Sequence

import pandas as pd

from .config import TOP_N_DEVICES
from .records import Record

FRAME_COLUMNS = [
    "supplier_name", "deliver_date", "customer", "device_name", "quantity", "model_number",
]


@dataclass
class TimeSeriesPoint:
    date: date
    value: int


@dataclass
class DeviceTotal:
    name: str
    value: int


@dataclass
class AggregateResult:
    """Summary statistics over one record collection."""
    total_lines: int = 0
    total_units: int = 0
    unique_suppliers: int = 0
    unique_customers: int = 0
    time_series: List[TimeSeriesPoint] = field(default_factory=list)
    top_devices: List[DeviceTotal] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization (dates as ISO text)."""
        out = asdict(self)
        out["time_series"] = [
            {"date": p.date.isoformat(), "value": p.value} for p in self.time_series
        ]
        return out


def _records_frame(records: Sequence[Record]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame([asdict(r) for r in records]).reindex(columns=FRAME_COLUMNS)
    # Python ints so per-group sums cannot wrap around at the int64 limit.
    return df.astype({"quantity": object})


def _distinct_non_empty(series: pd.Series) -> int:
    """Distinct count ignoring empty strings (a parse gap, not a participant)."""
    return int(series[series.astype(str) != ""].nunique())


def build_time_series(df: pd.DataFrame) -> List[TimeSeriesPoint]:
    """Sum quantity per exact delivery date, ascending. Undated rows are dropped."""
    dated = df[df["deliver_date"].notna()]
    if dated.empty:
        return []
    sums = dated.groupby("deliver_date", sort=True)["quantity"].sum()
    return [TimeSeriesPoint(date=d, value=int(v)) for d, v in sums.items()]


def rank_devices(df: pd.DataFrame, top_n: int = TOP_N_DEVICES) -> List[DeviceTotal]:
    """
    Sum quantity per device, sorted by total descending, ties by name ascending,
    truncated to top_n. An empty device name is ranked like any other name.
    """
    if df.empty:
        return []
    totals = (
        df.groupby("device_name", sort=False)["quantity"].sum()
        .reset_index()
        .sort_values(["quantity", "device_name"], ascending=[False, True], kind="mergesort")
        .head(top_n)
    )
    return [
        DeviceTotal(name=str(row.device_name), value=int(row.quantity))
        for row in totals.itertuples(index=False)
    ]


def aggregate(records: Sequence[Record], top_n: int = TOP_N_DEVICES) -> AggregateResult:
    """
    Compute the AggregateResult for a (usually filtered) record collection.

    Returns:
        AggregateResult with counts, a chronological series, and the top devices.
        An empty collection yields zeros and empty lists.
    """
    if not records:
        return AggregateResult()

    df = _records_frame(records)

    return AggregateResult(
        total_lines=int(len(df)),
        total_units=int(df["quantity"].sum()),
        unique_suppliers=_distinct_non_empty(df["supplier_name"]),
        unique_customers=_distinct_non_empty(df["customer"]),
        time_series=build_time_series(df),
        top_devices=rank_devices(df, top_n=top_n),
    )
