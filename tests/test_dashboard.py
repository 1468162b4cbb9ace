"""Tests for the dashboard functions."""

import pytest

from vendor_core.dashboard import (
    NO_BEST_SELLER,
    BestSeller,
    build_dashboard,
    distinct_customers_today,
    most_sold_vegetable,
    recent_sales,
    todays_sales,
    todays_total,
)
from vendor_core.models import Customer

from tests.test_utils import make_record

ASHA = Customer(id="c1", name="Asha", phone="1111111111")
BINA = Customer(id="c2", name="Bina", phone="2222222222")


@pytest.fixture
def sample_records() -> list:
    """Three sales on 2024-01-01 (two customers) and one on 2023-12-31."""
    return [
        make_record("s1", "2024-01-01", ASHA, [("Tomato", 2, 30), ("Onion", 1, 20)]),
        make_record("s2", "2023-12-31", BINA, [("Potato", 5, 10)]),
        make_record("s3", "2024-01-01", BINA, [("Onion", 3, 20)]),
        make_record("s4", "2024-01-01", ASHA, [("Tomato", 1, 30)]),
    ]


def test_todays_sales_exact_date_match(sample_records: list) -> None:
    """Only records whose date string equals today are returned."""
    today = todays_sales(sample_records, "2024-01-01")

    assert [r.id for r in today] == ["s1", "s3", "s4"]
    assert todays_sales(sample_records, "2024-01-02") == []


def test_todays_sales_two_dates() -> None:
    """Two records on different dates; only the matching one is today's."""
    records = [
        make_record("s1", "2024-01-01", ASHA, [("Tomato", 2, 30)]),
        make_record("s2", "2024-01-02", ASHA, [("Tomato", 2, 30)]),
    ]

    assert [r.id for r in todays_sales(records, "2024-01-01")] == ["s1"]


def test_todays_total(sample_records: list) -> None:
    """Today's total sums total_amount over today's records."""
    today = todays_sales(sample_records, "2024-01-01")

    assert todays_total(today) == 80 + 60 + 30
    assert todays_total([]) == 0.0


def test_most_sold_vegetable_counts_lines_and_weight(sample_records: list) -> None:
    """Best seller is chosen by line count and reports the summed weight."""
    today = todays_sales(sample_records, "2024-01-01")

    best = most_sold_vegetable(today)

    # Tomato and Onion both have 2 lines; Tomato was seen first.
    assert best == BestSeller(name="Tomato", count=2, weight=3)


def test_most_sold_vegetable_clear_winner() -> None:
    """A vegetable with more lines wins regardless of order."""
    records = [
        make_record("s1", "2024-01-01", ASHA, [("Tomato", 1, 30)]),
        make_record("s2", "2024-01-01", BINA, [("Onion", 1, 20), ("Onion", 2, 20)]),
    ]

    best = most_sold_vegetable(records)

    assert best.name == "Onion"
    assert best.count == 2
    assert best.weight == pytest.approx(3.0)


def test_most_sold_vegetable_sentinel_when_empty() -> None:
    """No sales today gives the 'None' sentinel."""
    assert most_sold_vegetable([]) == BestSeller(name="None", count=0, weight=0)
    assert most_sold_vegetable([make_record("s1", "2024-01-01", ASHA)]) == NO_BEST_SELLER


def test_recent_sales_sorted_and_capped() -> None:
    """At most n records, newest date first, same-date order kept."""
    records = [
        make_record(f"s{n}", f"2024-01-0{d}", ASHA)
        for n, d in enumerate([3, 1, 5, 2, 5, 4, 1], start=1)
    ]

    recent = recent_sales(records)

    assert len(recent) == 5
    assert [r.date for r in recent] == sorted((r.date for r in recent), reverse=True)
    assert [r.id for r in recent] == ["s3", "s5", "s6", "s1", "s4"]
    assert len(recent_sales(records, n=2)) == 2
    assert recent_sales(records, n=0) == []
    assert recent_sales([]) == []


def test_distinct_customers_today(sample_records: list) -> None:
    """Repeat customers are counted once."""
    today = todays_sales(sample_records, "2024-01-01")

    assert distinct_customers_today(today) == 2
    assert distinct_customers_today([]) == 0


def test_build_dashboard(sample_records: list) -> None:
    """build_dashboard bundles every statistic for the given day."""
    summary = build_dashboard(sample_records, customer_count=6, today="2024-01-01")

    assert summary.today == "2024-01-01"
    assert summary.todays_total == 170
    assert summary.transactions_today == 3
    assert summary.best_seller.name == "Tomato"
    assert summary.total_customers == 6
    assert summary.customers_today == 2
    assert [r.id for r in summary.recent] == ["s1", "s3", "s4", "s2"]


def test_build_dashboard_defaults_to_local_date() -> None:
    """Without an explicit date the summary is for today's local date."""
    from datetime import date

    summary = build_dashboard([], customer_count=0)

    assert summary.today == date.today().isoformat()
    assert summary.best_seller == NO_BEST_SELLER
    assert summary.recent == ()
