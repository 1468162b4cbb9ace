"""Sales marts: pandas tables aggregated from the ledger.

Grain Reference:
    - item lines: one row per line item (atomic grain)
    - sales: one row per sale record
    - daily: one row per date
    - vegetables: one row per vegetable name

The marts are read-only views of the ledger; they are rebuilt on every call
and written as CSV by ``export_marts``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

import pandas as pd

if TYPE_CHECKING:
    from vendor_core.config import StoragePaths

from vendor_core.models import SaleRecord

logger = logging.getLogger(__name__)

ITEM_LINE_COLUMNS = [
    "sale_id",
    "date",
    "customer_id",
    "customer_name",
    "item_id",
    "vegetable_name",
    "weight",
    "price_per_unit",
    "total_price",
]

SALE_COLUMNS = [
    "sale_id",
    "date",
    "customer_id",
    "customer_name",
    "num_items",
    "total_amount",
]


def item_lines_frame(records: Sequence[SaleRecord]) -> pd.DataFrame:
    """One row per line item, in ledger then item order."""
    rows = [
        {
            "sale_id": record.id,
            "date": record.date,
            "customer_id": record.customer_id,
            "customer_name": record.customer.name,
            "item_id": item.id,
            "vegetable_name": item.vegetable_name,
            "weight": item.weight,
            "price_per_unit": item.price_per_unit,
            "total_price": item.total_price,
        }
        for record in records
        for item in record.items
    ]
    return pd.DataFrame(rows, columns=ITEM_LINE_COLUMNS)


def sales_frame(records: Sequence[SaleRecord]) -> pd.DataFrame:
    """One row per sale record."""
    rows = [
        {
            "sale_id": record.id,
            "date": record.date,
            "customer_id": record.customer_id,
            "customer_name": record.customer.name,
            "num_items": len(record.items),
            "total_amount": record.total_amount,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=SALE_COLUMNS)


def _in_range(df: pd.DataFrame, start_date: Optional[str], end_date: Optional[str]) -> pd.DataFrame:
    """Filter on the ``date`` column (YYYY-MM-DD strings, inclusive)."""
    if start_date:
        df = df[df["date"] >= start_date]
    if end_date:
        df = df[df["date"] <= end_date]
    return df


def daily_totals(
    records: Sequence[SaleRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> pd.DataFrame:
    """Aggregate sales per date.

    Returns:
        DataFrame with columns date, num_sales, num_customers, total_amount,
        total_weight, sorted by date.
    """
    sales = _in_range(sales_frame(records), start_date, end_date)
    lines = _in_range(item_lines_frame(records), start_date, end_date)

    if sales.empty:
        return pd.DataFrame(
            columns=["date", "num_sales", "num_customers", "total_amount", "total_weight"]
        )

    daily = (
        sales.groupby("date", sort=True)
        .agg(
            num_sales=("sale_id", "count"),
            num_customers=("customer_id", "nunique"),
            total_amount=("total_amount", "sum"),
        )
        .reset_index()
    )
    weights = lines.groupby("date")["weight"].sum().rename("total_weight")
    daily = daily.merge(weights, how="left", left_on="date", right_index=True)
    daily["total_weight"] = daily["total_weight"].fillna(0.0)
    return daily


def vegetable_summary(
    records: Sequence[SaleRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> pd.DataFrame:
    """Aggregate line items per vegetable.

    Ordered by count (descending); equal counts keep first-seen order, the
    same tie-break the dashboard's best seller uses.

    Returns:
        DataFrame with columns vegetable_name, count, weight, revenue.
    """
    lines = _in_range(item_lines_frame(records), start_date, end_date)
    if lines.empty:
        return pd.DataFrame(columns=["vegetable_name", "count", "weight", "revenue"])

    summary = (
        lines.groupby("vegetable_name", sort=False)
        .agg(
            count=("item_id", "count"),
            weight=("weight", "sum"),
            revenue=("total_price", "sum"),
        )
        .reset_index()
    )
    return summary.sort_values("count", ascending=False, kind="stable").reset_index(drop=True)


def export_marts(
    paths: StoragePaths,
    records: Sequence[SaleRecord],
    start_date: str,
    end_date: str,
) -> dict[str, Path]:
    """Write the sales, item-line, daily and vegetable marts as CSV.

    Args:
        paths: StoragePaths configuration.
        records: Ledger snapshot.
        start_date: Start date in YYYY-MM-DD format (inclusive).
        end_date: End date in YYYY-MM-DD format (inclusive).

    Returns:
        Mapping of mart name to written file path.

    """
    paths.ensure_dirs()

    marts = {
        "sales": _in_range(sales_frame(records), start_date, end_date),
        "item_lines": _in_range(item_lines_frame(records), start_date, end_date),
        "daily": daily_totals(records, start_date, end_date),
        "vegetables": vegetable_summary(records, start_date, end_date),
    }

    written: dict[str, Path] = {}
    for name, df in marts.items():
        out_path = paths.marts / f"mart_{name}_{start_date}_{end_date}.csv"
        df.to_csv(out_path, index=False, encoding="utf-8")
        logger.info("Wrote %s (%d rows)", out_path, len(df))
        written[name] = out_path
    return written
