"""Shared test utilities.

Builders for in-memory registries, ledgers and records used across test files.
"""

from __future__ import annotations

import math
from typing import Sequence

from vendor_core.customers import CustomerRegistry
from vendor_core.ids import SequentialIdGenerator
from vendor_core.models import Customer, LineItem, SaleRecord
from vendor_core.sales import SalesLedger
from vendor_core.storage import MemorySnapshotStore


def make_registry(store: MemorySnapshotStore | None = None, seed: bool = False) -> CustomerRegistry:
    """Registry with deterministic ids c1, c2, ... and (by default) no seed customers."""
    return CustomerRegistry(
        store if store is not None else MemorySnapshotStore(),
        id_generator=SequentialIdGenerator("c"),
        **({} if seed else {"default": ()}),
    )


def make_ledger(store: MemorySnapshotStore | None = None) -> SalesLedger:
    """Ledger with deterministic ids s1, s2, ..."""
    return SalesLedger(
        store if store is not None else MemorySnapshotStore(),
        id_generator=SequentialIdGenerator("s"),
    )


def make_record(
    sale_id: str,
    date: str,
    customer: Customer,
    items: Sequence[tuple[str, float, float]] = (),
) -> SaleRecord:
    """Build a consistent SaleRecord directly (bypassing the ledger)."""
    line_items = tuple(
        LineItem(
            id=f"{sale_id}-i{n}",
            vegetable_name=name,
            weight=weight,
            price_per_unit=price,
            total_price=weight * price,
        )
        for n, (name, weight, price) in enumerate(items, start=1)
    )
    return SaleRecord(
        id=sale_id,
        date=date,
        customer_id=customer.id,
        customer=customer,
        items=line_items,
        total_amount=sum(i.total_price for i in line_items),
    )


def assert_totals_consistent(record: SaleRecord) -> None:
    """Assert both derived-field invariants on a record."""
    for item in record.items:
        assert math.isclose(item.total_price, item.weight * item.price_per_unit), item
    assert math.isclose(
        record.total_amount, sum(i.total_price for i in record.items), abs_tol=1e-9
    ), record
