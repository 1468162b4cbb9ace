"""Public API for the ledger QA checks.

This module runs the consistency checks in memory, without reading or
writing any files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from vendor_core.exceptions import DataQualityError
from vendor_core.models import Customer, SaleRecord
from vendor_core.qa.checks import (
    ITEM_REQUIRED_COLUMNS,
    SALE_REQUIRED_COLUMNS,
    detect_invalid_items,
    detect_item_total_mismatches,
    detect_orphan_sales,
    detect_sale_total_mismatches,
    detect_stale_customer_copies,
)
from vendor_core.sales.marts import item_lines_frame, sales_frame

logger = logging.getLogger(__name__)


@dataclass
class LedgerQAResult:
    """Result of the ledger QA checks.

    Attributes:
        summary: Dictionary with counts and flags.
        item_total_mismatches: Items whose total_price != weight x price, or None.
        sale_total_mismatches: Sales whose total_amount != sum of items, or None.
        orphan_sales: Sales whose customer was deleted from the registry, or None.
        stale_customer_copies: Sales whose customer copy differs from the registry, or None.
        invalid_items: Items with empty names or non-positive weight/price, or None.
    """

    summary: dict
    item_total_mismatches: pd.DataFrame | None
    sale_total_mismatches: pd.DataFrame | None
    orphan_sales: pd.DataFrame | None
    stale_customer_copies: pd.DataFrame | None
    invalid_items: pd.DataFrame | None

    @property
    def has_errors(self) -> bool:
        """True when a derived total is inconsistent (stale copies do not count)."""
        return bool(
            self.summary["item_total_mismatch_count"] or self.summary["sale_total_mismatch_count"]
        )


def run_ledger_qa(
    records: Sequence[SaleRecord],
    customers: Sequence[Customer],
    *,
    lines: Optional[pd.DataFrame] = None,
    sales: Optional[pd.DataFrame] = None,
) -> LedgerQAResult:
    """Run all ledger QA checks.

    Args:
        records: Ledger snapshot.
        customers: Registry snapshot.
        lines: Optional pre-built item-line mart (defaults to one built from records).
        sales: Optional pre-built sales mart (defaults to one built from records).

    Returns:
        LedgerQAResult with per-check DataFrames and a summary.

    Raises:
        DataQualityError: If a supplied mart lacks required columns.
    """
    if lines is None:
        lines = item_lines_frame(records)
    if sales is None:
        sales = sales_frame(records)

    missing = [c for c in ITEM_REQUIRED_COLUMNS if c not in lines.columns]
    missing += [c for c in SALE_REQUIRED_COLUMNS if c not in sales.columns]
    if missing:
        raise DataQualityError(f"Missing required columns for ledger QA: {missing}")

    logger.info(f"Running ledger QA over {len(sales)} sales and {len(lines)} item lines")

    item_mismatches = detect_item_total_mismatches(lines)
    sale_mismatches = detect_sale_total_mismatches(sales, lines)
    orphans = detect_orphan_sales(sales, [c.id for c in customers])
    stale = detect_stale_customer_copies(records, customers)
    invalid = detect_invalid_items(lines)

    def _count(df: pd.DataFrame | None) -> int:
        return len(df) if df is not None else 0

    summary = {
        "total_sales": len(sales),
        "total_item_lines": len(lines),
        "total_customers": len(customers),
        "min_date": str(sales["date"].min()) if "date" in sales.columns and not sales.empty else None,
        "max_date": str(sales["date"].max()) if "date" in sales.columns and not sales.empty else None,
        "item_total_mismatch_count": _count(item_mismatches),
        "sale_total_mismatch_count": _count(sale_mismatches),
        "orphan_sale_count": _count(orphans),
        "stale_customer_copy_count": _count(stale),
        "invalid_item_count": _count(invalid),
    }

    logger.info(
        f"QA complete: {summary['item_total_mismatch_count']} item mismatches, "
        f"{summary['sale_total_mismatch_count']} sale mismatches, "
        f"{summary['orphan_sale_count']} orphan sales, "
        f"{summary['stale_customer_copy_count']} stale customer copies"
    )

    return LedgerQAResult(
        summary=summary,
        item_total_mismatches=item_mismatches,
        sale_total_mismatches=sale_mismatches,
        orphan_sales=orphans,
        stale_customer_copies=stale,
        invalid_items=invalid,
    )
