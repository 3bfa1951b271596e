"""
Tests for the record parser.

Run from the repo root:
    pytest gudid_utils
"""

from datetime import date

from gudid_utils.config import RECOGNIZED_COLUMNS
from gudid_utils.records import (
    Record,
    coerce_quantity,
    decode_upload,
    load_sample_records,
    parse_date,
    parse_records,
    records_to_frame,
)

import pandas as pd

HEADER = "Suppliername,deliverdate,customer,DeviceName,Numbers,ModelNum"


def test_parses_rows_in_order():
    text = "\n".join([
        HEADER,
        "S1,2024-01-01,C1,D1,5,M1",
        "S2,2024-01-02,C2,D2,3,M2",
    ])
    records = parse_records(text)
    assert records == [
        Record("S1", date(2024, 1, 1), "C1", "D1", 5, "M1"),
        Record("S2", date(2024, 1, 2), "C2", "D2", 3, "M2"),
    ]


def test_column_order_does_not_matter():
    reordered = "\n".join([
        "Numbers,ModelNum,DeviceName,customer,deliverdate,Suppliername",
        "5,M1,D1,C1,2024-01-01,S1",
    ])
    assert parse_records(reordered) == [Record("S1", date(2024, 1, 1), "C1", "D1", 5, "M1")]


def test_unknown_columns_ignored_and_missing_columns_default():
    text = "\n".join([
        "Extra,DeviceName,Suppliername,Notes",
        "x,Stent,Acme,fragile",
    ])
    [record] = parse_records(text)
    assert record.device_name == "Stent"
    assert record.supplier_name == "Acme"
    assert record.customer == ""
    assert record.quantity == 0
    assert record.deliver_date is None
    assert record.model_number == ""


def test_header_match_is_case_sensitive():
    text = "suppliername,DeviceName\nAcme,Stent"
    [record] = parse_records(text)
    assert record.supplier_name == ""
    assert record.device_name == "Stent"


def test_first_duplicate_header_wins():
    text = "DeviceName,DeviceName\nFirst,Second"
    assert parse_records(text)[0].device_name == "First"


def test_malformed_quantity_becomes_zero():
    text = "\n".join([
        HEADER,
        "S1,2024-01-01,C1,D1,abc,M1",
        "S1,2024-01-01,C1,D1,,M1",
        "S1,2024-01-01,C1,D1,-4,M1",
        "S1,2024-01-01,C1,D1,3.9,M1",
        "S1,2024-01-01,C1,D1, 12 ,M1",
    ])
    assert [r.quantity for r in parse_records(text)] == [0, 0, 0, 3, 12]


def test_quantity_too_large_for_int64_becomes_zero():
    values = ["99999999999999999999", "1e19", "9223372036854775808", "1e300", "9000000000000000000"]
    lines = [HEADER] + [f"S,2024-01-01,C,D,{v},M" for v in values]
    quantities = [r.quantity for r in parse_records("\n".join(lines))]
    assert quantities == [0, 0, 0, 0, 9000000000000000000]
    assert all(q >= 0 for q in quantities)


def test_oversized_field_skips_only_that_line():
    text = "\n".join([
        HEADER,
        "S1,2024-01-01,C1," + "X" * 200_000 + ",5,M1",
        "S2,2024-01-02,C2,D2,7,M2",
    ])
    records = parse_records(text)
    assert records == [Record("S2", date(2024, 1, 2), "C2", "D2", 7, "M2")]


def test_short_and_blank_lines_are_skipped():
    text = "\n".join([
        HEADER,
        "S1,2024-01-01,C1,D1,5,M1",
        "",
        "   ",
        "S2,2024-01-02,C2",
        "S3,2024-01-03,C3,D3,7,M3",
    ])
    records = parse_records(text)
    assert [r.supplier_name for r in records] == ["S1", "S3"]


def test_longer_lines_are_kept():
    text = HEADER + "\nS1,2024-01-01,C1,D1,5,M1,extra,fields"
    assert len(parse_records(text)) == 1


def test_bad_or_missing_date_is_none():
    text = "\n".join([
        HEADER,
        "S1,not a date,C1,D1,5,M1",
        "S1,,C1,D1,5,M1",
        "S1,2024-13-45,C1,D1,5,M1",
    ])
    assert [r.deliver_date for r in parse_records(text)] == [None, None, None]


def test_mixed_date_formats():
    text = "\n".join([
        HEADER,
        "S1,2024-01-05,C1,D1,5,M1",
        "S1,01/06/2024,C1,D1,5,M1",
    ])
    assert [r.deliver_date for r in parse_records(text)] == [date(2024, 1, 5), date(2024, 1, 6)]


def test_quoted_fields_and_whitespace():
    text = HEADER + '\n"Acme, Inc.", 2024-01-01 ,  C1 ,D1,5,M1'
    [record] = parse_records(text)
    assert record.supplier_name == "Acme, Inc."
    assert record.customer == "C1"
    assert record.deliver_date == date(2024, 1, 1)


def test_bom_and_leading_blank_lines_before_header():
    text = "\n\n\ufeff" + HEADER + "\nS1,2024-01-01,C1,D1,5,M1"
    [record] = parse_records(text)
    assert record.supplier_name == "S1"


def test_other_delimiters():
    text = HEADER.replace(",", ";") + "\nS1;2024-01-01;C1;D1;5;M1"
    assert parse_records(text, delimiter=";")[0].quantity == 5


def test_empty_and_header_only_input():
    assert parse_records("") == []
    assert parse_records("   \n  ") == []
    assert parse_records(HEADER) == []


def test_sum_of_quantities_matches_numbers_column():
    values = ["5", "x", "7", "", "2.5", "-1", "100"]
    lines = [HEADER] + [f"S,2024-01-01,C,D,{v},M" for v in values]
    records = parse_records("\n".join(lines))
    assert sum(r.quantity for r in records) == 5 + 0 + 7 + 0 + 2 + 0 + 100


def test_parse_date_values():
    assert parse_date(None) is None
    assert parse_date("") is None
    assert parse_date("today") is None
    assert parse_date("2024") is None
    assert parse_date("2024-01") is None
    assert parse_date("01/2024") is None
    assert parse_date("Jan 2024") is None
    assert parse_date("20240105") == date(2024, 1, 5)
    assert parse_date("Jan 5, 2024") == date(2024, 1, 5)
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    assert parse_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert parse_date(pd.Timestamp("2024-03-01 13:45")) == date(2024, 3, 1)


def test_coerce_quantity_series():
    out = coerce_quantity(pd.Series(["1", "inf", "nan", "2e1", "-3", "1e19", "-inf"]))
    assert out.tolist() == [1, 0, 0, 20, 0, 0, 0]


def test_decode_upload_drops_bom():
    assert decode_upload("\ufeffa,b".encode("utf-8")) == "a,b"
    assert decode_upload(b"a,\xff") == "a,\ufffd"


def test_sample_records_load():
    records = load_sample_records()
    assert len(records) == 24
    assert all(r.deliver_date is not None for r in records)
    assert records[0].supplier_name == "Medtronic Taiwan"


def test_records_to_frame():
    df = records_to_frame([Record("S1", date(2024, 1, 1), "C1", "D1", 5, "M1")])
    assert list(df.columns) == RECOGNIZED_COLUMNS
    assert df.iloc[0]["Numbers"] == 5

    empty = records_to_frame([])
    assert empty.empty
    assert list(empty.columns) == RECOGNIZED_COLUMNS
