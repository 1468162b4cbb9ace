"""Tests for the ledger QA checks."""

from dataclasses import replace

import pandas as pd
import pytest

from vendor_core.exceptions import DataQualityError
from vendor_core.models import Customer
from vendor_core.qa import LedgerQAResult, run_ledger_qa
from vendor_core.qa.checks import detect_item_total_mismatches

from tests.test_utils import make_record

ASHA = Customer(id="c1", name="Asha", phone="1111111111")
BINA = Customer(id="c2", name="Bina", phone="2222222222")


def test_clean_ledger_has_no_findings() -> None:
    """A ledger built with consistent totals passes every check."""
    records = [
        make_record("s1", "2024-01-01", ASHA, [("Tomato", 2, 30)]),
        make_record("s2", "2024-01-02", BINA, [("Onion", 1.5, 20.1)]),
    ]

    result = run_ledger_qa(records, [ASHA, BINA])

    assert isinstance(result, LedgerQAResult)
    assert result.has_errors is False
    assert result.item_total_mismatches is None
    assert result.sale_total_mismatches is None
    assert result.orphan_sales is None
    assert result.stale_customer_copies is None
    assert result.invalid_items is None
    assert result.summary["total_sales"] == 2
    assert result.summary["min_date"] == "2024-01-01"
    assert result.summary["max_date"] == "2024-01-02"


def test_detects_tampered_totals() -> None:
    """Hand-edited item and sale totals are both reported."""
    good = make_record("s1", "2024-01-01", ASHA, [("Tomato", 2, 30)])
    bad_item = replace(good.items[0], total_price=55.0)
    tampered_items = replace(good, id="s2", items=(bad_item,), total_amount=55.0)
    tampered_total = replace(good, id="s3", total_amount=999.0)

    result = run_ledger_qa([good, tampered_items, tampered_total], [ASHA])

    assert result.has_errors is True
    assert list(result.item_total_mismatches["sale_id"]) == ["s2"]
    assert result.item_total_mismatches.iloc[0]["expected_total_price"] == 60
    assert list(result.sale_total_mismatches["sale_id"]) == ["s3"]


def test_detects_orphan_and_stale_customers() -> None:
    """Deleted customers make orphan sales; edited customers make stale copies."""
    renamed = replace(ASHA, name="Asha R")
    records = [
        make_record("s1", "2024-01-01", ASHA, [("Tomato", 1, 10)]),
        make_record("s2", "2024-01-01", BINA, [("Onion", 1, 10)]),
    ]

    result = run_ledger_qa(records, [renamed])

    assert list(result.orphan_sales["sale_id"]) == ["s2"]
    assert result.stale_customer_copies.iloc[0]["changed_fields"] == "name"
    assert result.has_errors is False


def test_detects_invalid_items() -> None:
    """Empty names and non-positive weights are flagged."""
    records = [make_record("s1", "2024-01-01", ASHA, [(" ", 1, 10), ("Onion", 0, 10), ("Tomato", 1, 5)])]

    result = run_ledger_qa(records, [ASHA])

    assert result.summary["invalid_item_count"] == 2


def test_missing_columns_raise() -> None:
    """A supplied mart without required columns is rejected."""
    with pytest.raises(DataQualityError):
        run_ledger_qa([], [], lines=pd.DataFrame({"sale_id": []}))


def test_float_tolerance() -> None:
    """Tiny float noise is not a mismatch."""
    lines = pd.DataFrame(
        {
            "sale_id": ["s1"],
            "item_id": ["i1"],
            "vegetable_name": ["Potato"],
            "weight": [2.5],
            "price_per_unit": [12.4],
            "total_price": [31.0],
        }
    )

    assert detect_item_total_mismatches(lines) is None
