"""Dashboard domain module.

Example:
    >>> from vendor_core.dashboard import build_dashboard
    >>>
    >>> summary = build_dashboard(ledger.records, len(registry), today="2024-01-01")
    >>> summary.best_seller.name
    'Tomato'
"""

from vendor_core.dashboard.api import (
    NO_BEST_SELLER,
    BestSeller,
    DashboardSummary,
    build_dashboard,
    distinct_customers_today,
    most_sold_vegetable,
    recent_sales,
    todays_sales,
    todays_total,
)

__all__ = [
    "NO_BEST_SELLER",
    "BestSeller",
    "DashboardSummary",
    "build_dashboard",
    "distinct_customers_today",
    "most_sold_vegetable",
    "recent_sales",
    "todays_sales",
    "todays_total",
]
