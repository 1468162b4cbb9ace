"""Public API for the dashboard summary.

Pure functions over the current ledger and registry snapshots. Nothing is
cached; every call recomputes from the records it is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as date_cls
from typing import Iterable, Optional, Sequence

from vendor_core.models import SaleRecord

logger = logging.getLogger(__name__)

NO_SALES = "None"


@dataclass(frozen=True)
class BestSeller:
    """Most frequently sold vegetable of a day.

    Attributes:
        name: Vegetable name, or "None" when nothing was sold.
        count: Number of line items naming this vegetable.
        weight: Total weight sold across those lines (kg).
    """

    name: str
    count: int
    weight: float


NO_BEST_SELLER = BestSeller(name=NO_SALES, count=0, weight=0.0)


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard view shows.

    Attributes:
        today: Date the summary was computed for (YYYY-MM-DD).
        todays_total: Revenue of today's sales.
        transactions_today: Number of today's sale records.
        best_seller: Most sold vegetable today.
        total_customers: Size of the customer registry.
        customers_today: Distinct customers with a sale today.
        recent: Most recent sale records, newest first.
    """

    today: str
    todays_total: float
    transactions_today: int
    best_seller: BestSeller
    total_customers: int
    customers_today: int
    recent: tuple[SaleRecord, ...]


def todays_sales(records: Iterable[SaleRecord], today: str) -> list[SaleRecord]:
    """Records whose date equals ``today`` exactly."""
    return [record for record in records if record.date == today]


def todays_total(todays: Iterable[SaleRecord]) -> float:
    """Sum of total_amount over the given records."""
    return sum((record.total_amount for record in todays), 0.0)


def most_sold_vegetable(todays: Iterable[SaleRecord]) -> BestSeller:
    """Vegetable with the most line items across the given records.

    Ties go to the name seen first. Returns ``NO_BEST_SELLER`` when there
    are no line items.
    """
    counts: dict[str, list] = {}
    for record in todays:
        for item in record.items:
            entry = counts.setdefault(item.vegetable_name, [0, 0.0])
            entry[0] += 1
            entry[1] += item.weight

    best = NO_BEST_SELLER
    for name, (count, weight) in counts.items():
        if count > best.count:
            best = BestSeller(name=name, count=count, weight=weight)
    return best


def recent_sales(records: Sequence[SaleRecord], n: int = 5) -> list[SaleRecord]:
    """The ``n`` records with the latest dates, newest first.

    Records on the same date keep their ledger order.
    """
    if n <= 0:
        return []
    return sorted(records, key=lambda r: r.date, reverse=True)[:n]


def distinct_customers_today(todays: Iterable[SaleRecord]) -> int:
    """Number of distinct customer ids among the given records."""
    return len({record.customer_id for record in todays})


def build_dashboard(
    records: Sequence[SaleRecord],
    customer_count: int,
    today: Optional[str] = None,
    recent: int = 5,
) -> DashboardSummary:
    """Compute the full dashboard summary.

    Args:
        records: Current ledger snapshot.
        customer_count: Number of customers in the registry.
        today: Date to summarize (YYYY-MM-DD). Defaults to the local date.
        recent: How many recent sales to include.

    Returns:
        DashboardSummary for ``today``.

    """
    if today is None:
        today = date_cls.today().isoformat()

    todays = todays_sales(records, today)
    summary = DashboardSummary(
        today=today,
        todays_total=todays_total(todays),
        transactions_today=len(todays),
        best_seller=most_sold_vegetable(todays),
        total_customers=customer_count,
        customers_today=distinct_customers_today(todays),
        recent=tuple(recent_sales(records, recent)),
    )
    logger.debug(
        "Dashboard for %s: %d sales, total %.2f", today, summary.transactions_today, summary.todays_total
    )
    return summary
