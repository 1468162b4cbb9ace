"""Tests for the pandas sales marts and CSV export."""

from pathlib import Path

import pandas as pd
import pytest

from vendor_core.config import StoragePaths
from vendor_core.models import Customer
from vendor_core.sales.marts import (
    ITEM_LINE_COLUMNS,
    SALE_COLUMNS,
    daily_totals,
    export_marts,
    item_lines_frame,
    sales_frame,
    vegetable_summary,
)

from tests.test_utils import make_record

ASHA = Customer(id="c1", name="Asha", phone="1111111111")
BINA = Customer(id="c2", name="Bina", phone="2222222222")


@pytest.fixture
def sample_records() -> list:
    return [
        make_record("s1", "2024-01-01", ASHA, [("Tomato", 2, 30), ("Onion", 1, 20)]),
        make_record("s2", "2024-01-01", BINA, [("Onion", 3, 20)]),
        make_record("s3", "2024-01-02", ASHA, [("Potato", 5, 10)]),
        make_record("s4", "2024-01-03", BINA),
    ]


def test_item_lines_grain(sample_records: list) -> None:
    """One row per line item; sales without items contribute nothing."""
    lines = item_lines_frame(sample_records)

    assert list(lines.columns) == ITEM_LINE_COLUMNS
    assert len(lines) == 4
    assert lines["item_id"].is_unique
    assert list(lines["sale_id"]) == ["s1", "s1", "s2", "s3"]


def test_sales_grain(sample_records: list) -> None:
    """One row per sale, including empty ones."""
    sales = sales_frame(sample_records)

    assert list(sales.columns) == SALE_COLUMNS
    assert list(sales["num_items"]) == [2, 1, 1, 0]
    assert sales["total_amount"].sum() == pytest.approx(80 + 60 + 50)


def test_empty_frames_keep_columns() -> None:
    assert list(item_lines_frame([]).columns) == ITEM_LINE_COLUMNS
    assert sales_frame([]).empty


def test_daily_totals(sample_records: list) -> None:
    """Per-date sales, distinct customers, revenue and weight."""
    daily = daily_totals(sample_records)

    assert list(daily["date"]) == ["2024-01-01", "2024-01-02", "2024-01-03"]
    first = daily.iloc[0]
    assert first["num_sales"] == 2
    assert first["num_customers"] == 2
    assert first["total_amount"] == pytest.approx(140)
    assert first["total_weight"] == pytest.approx(6)
    assert daily.iloc[2]["total_weight"] == 0


def test_daily_totals_date_range(sample_records: list) -> None:
    """start/end bounds are inclusive."""
    daily = daily_totals(sample_records, "2024-01-02", "2024-01-02")

    assert list(daily["date"]) == ["2024-01-02"]
    assert daily_totals(sample_records, "2025-01-01", "2025-01-31").empty


def test_vegetable_summary(sample_records: list) -> None:
    """Ordered by count; ties keep first-seen order."""
    summary = vegetable_summary(sample_records)

    assert list(summary["vegetable_name"]) == ["Onion", "Tomato", "Potato"]
    onion = summary.iloc[0]
    assert onion["count"] == 2
    assert onion["weight"] == pytest.approx(4)
    assert onion["revenue"] == pytest.approx(80)


def test_export_marts_writes_csvs(tmp_path: Path, sample_records: list) -> None:
    """export_marts writes one CSV per mart under paths.marts."""
    paths = StoragePaths.from_root(tmp_path)

    written = export_marts(paths, sample_records, "2024-01-01", "2024-01-02")

    assert set(written) == {"sales", "item_lines", "daily", "vegetables"}
    for path in written.values():
        assert path.parent == paths.marts
        assert path.exists()

    sales = pd.read_csv(written["sales"])
    assert list(sales["sale_id"]) == ["s1", "s2", "s3"]
    assert written["daily"].name == "mart_daily_2024-01-01_2024-01-02.csv"
