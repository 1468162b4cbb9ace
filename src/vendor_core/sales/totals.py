"""Derived-field arithmetic for line items and sale records.

Plain float arithmetic; rounding is left to display formatting.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from vendor_core.models import LineItem, SaleRecord


def line_total(weight: float, price_per_unit: float) -> float:
    """Total price of a line: weight (kg) x price per kg."""
    return weight * price_per_unit


def sale_total(items: Iterable[LineItem]) -> float:
    """Sum of the items' total_price, trusting each item's stored value."""
    return sum((item.total_price for item in items), 0.0)


def priced(item: LineItem) -> LineItem:
    """Return ``item`` with total_price recomputed from weight and price."""
    return replace(item, total_price=line_total(item.weight, item.price_per_unit))


def with_items(record: SaleRecord, items: tuple[LineItem, ...]) -> SaleRecord:
    """Return ``record`` holding ``items`` with total_amount recomputed."""
    return replace(record, items=items, total_amount=sale_total(items))
