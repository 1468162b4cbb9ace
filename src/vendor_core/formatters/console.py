"""Console output formatting utilities."""

from __future__ import annotations

from typing import Sequence

from vendor_core.config import DisplayConfig
from vendor_core.dashboard.api import NO_SALES, DashboardSummary
from vendor_core.models import Customer, SaleRecord
from vendor_core.qa.api import LedgerQAResult


def format_dashboard(summary: DashboardSummary, display: DisplayConfig | None = None) -> str:
    """Build a human-readable dashboard for console output.

    Args:
        summary: DashboardSummary from build_dashboard.
        display: Display settings (currency, decimals).

    Returns:
        Text block for console output.
    """
    display = display or DisplayConfig()
    lines = []
    lines.append(f"Dashboard - {summary.today}")
    lines.append("=" * 60)
    lines.append("")

    lines.append(f"Today's Sales: {display.money(summary.todays_total)}")
    lines.append(f"  {summary.transactions_today} transactions today")

    best = summary.best_seller
    lines.append(f"Most Sold Today: {best.name}")
    if best.name != NO_SALES:
        lines.append(f"  {display.weight(best.weight)} ({best.count} sales)")

    lines.append(f"Total Customers: {summary.total_customers}")
    if summary.transactions_today > 0:
        lines.append(f"  {summary.customers_today} customers today")
    else:
        lines.append("  No customers today")
    lines.append("")

    lines.append("Recent Sales:")
    lines.append("-" * 60)
    if summary.recent:
        lines.extend(_sale_rows(summary.recent, display))
    else:
        lines.append("No sales records yet.")

    return "\n".join(lines)


def format_customers(customers: Sequence[Customer]) -> str:
    if not customers:
        return "No customers found."
    lines = [f"{'ID':<38} {'Name':<24} {'Phone':<12} Address"]
    for c in customers:
        lines.append(f"{c.id:<38} {c.name:<24} {c.phone:<12} {c.address or ''}")
    return "\n".join(lines)


def format_sales(records: Sequence[SaleRecord], display: DisplayConfig | None = None) -> str:
    display = display or DisplayConfig()
    if not records:
        return "No sales records found."
    return "\n".join(_sale_rows(records, display))


def format_sale_detail(record: SaleRecord, display: DisplayConfig | None = None) -> str:
    """One sale with its line items, item ids included for editing."""
    display = display or DisplayConfig()
    lines = [
        f"Sale {record.id} - {record.date} - {record.customer.name}",
        "-" * 60,
    ]
    if not record.items:
        lines.append("No items.")
    for item in record.items:
        lines.append(
            f"{item.vegetable_name:<16} {display.weight(item.weight):>10} x "
            f"{display.money(item.price_per_unit):>10} = {display.money(item.total_price):>12}  [{item.id}]"
        )
    lines.append("-" * 60)
    lines.append(f"Total: {display.money(record.total_amount)}")
    return "\n".join(lines)


def format_qa(result: LedgerQAResult) -> str:
    s = result.summary
    lines = [
        f"Ledger QA - {s['total_sales']} sales, {s['total_item_lines']} item lines",
        "=" * 60,
        f"Item total mismatches:  {s['item_total_mismatch_count']}",
        f"Sale total mismatches:  {s['sale_total_mismatch_count']}",
        f"Orphan sales:           {s['orphan_sale_count']}",
        f"Stale customer copies:  {s['stale_customer_copy_count']}",
        f"Invalid items:          {s['invalid_item_count']}",
    ]
    return "\n".join(lines)


def _sale_rows(records: Sequence[SaleRecord], display: DisplayConfig) -> list[str]:
    rows = []
    for record in records:
        rows.append(
            f"{record.date}  {record.customer.name:<24} {len(record.items)} items  "
            f"{display.money(record.total_amount)}  [{record.id}]"
        )
    return rows
