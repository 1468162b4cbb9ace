"""Consistency checks over the sales marts.

Each ``detect_*`` function takes a mart DataFrame and returns the offending
rows, or None when nothing is found.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from vendor_core.models import Customer, SaleRecord

# Absolute tolerance when comparing derived money values.
TOLERANCE = 1e-6

ITEM_REQUIRED_COLUMNS = ["sale_id", "item_id", "vegetable_name", "weight", "price_per_unit", "total_price"]
SALE_REQUIRED_COLUMNS = ["sale_id", "customer_id", "total_amount"]


def detect_item_total_mismatches(lines: pd.DataFrame) -> pd.DataFrame | None:
    """Line items whose total_price differs from weight x price_per_unit.

    Examples:
        >>> lines = pd.DataFrame({
        ...     'sale_id': ['s1'], 'item_id': ['i1'],
        ...     'weight': [2.0], 'price_per_unit': [30.0], 'total_price': [50.0],
        ... })
        >>> len(detect_item_total_mismatches(lines))
        1

    """
    if lines.empty:
        return None

    expected = lines["weight"].astype(float) * lines["price_per_unit"].astype(float)
    mask = ~np.isclose(lines["total_price"].astype(float), expected, rtol=0.0, atol=TOLERANCE)
    if not mask.any():
        return None

    out = lines[mask].copy()
    out["expected_total_price"] = expected[mask]
    return out


def detect_sale_total_mismatches(
    sales: pd.DataFrame,
    lines: pd.DataFrame,
) -> pd.DataFrame | None:
    """Sales whose total_amount differs from the sum of their items' total_price."""
    if sales.empty:
        return None

    item_sums = lines.groupby("sale_id")["total_price"].sum() if not lines.empty else pd.Series(dtype=float)
    expected = sales["sale_id"].map(item_sums).fillna(0.0).astype(float)
    mask = ~np.isclose(sales["total_amount"].astype(float), expected, rtol=0.0, atol=TOLERANCE)
    if not mask.any():
        return None

    out = sales[mask].copy()
    out["expected_total_amount"] = expected[mask]
    return out


def detect_orphan_sales(sales: pd.DataFrame, customer_ids: Iterable[str]) -> pd.DataFrame | None:
    """Sales pointing at a customer id that is no longer in the registry."""
    if sales.empty:
        return None

    mask = ~sales["customer_id"].isin(set(customer_ids))
    if not mask.any():
        return None
    return sales[mask].copy()


def detect_stale_customer_copies(
    records: Iterable[SaleRecord],
    customers: Iterable[Customer],
) -> pd.DataFrame | None:
    """Sales whose embedded customer copy differs from the registry's current entry.

    This is informational: copies are point-in-time snapshots and only
    change when the sale is re-saved.
    """
    current = {c.id: c for c in customers}
    rows = []
    for record in records:
        live = current.get(record.customer_id)
        if live is None or live == record.customer:
            continue
        changed = [
            field
            for field in ("name", "phone", "address")
            if getattr(live, field) != getattr(record.customer, field)
        ]
        rows.append(
            {
                "sale_id": record.id,
                "customer_id": record.customer_id,
                "changed_fields": ",".join(changed),
            }
        )
    if not rows:
        return None
    return pd.DataFrame(rows)


def detect_invalid_items(lines: pd.DataFrame) -> pd.DataFrame | None:
    """Line items with an empty name or a non-positive weight or price."""
    if lines.empty:
        return None

    names = lines["vegetable_name"].fillna("").astype(str).str.strip()
    mask = (names == "") | (lines["weight"] <= 0) | (lines["price_per_unit"] <= 0)
    if not mask.any():
        return None
    return lines[mask].copy()
