"""Sales domain module.

This module provides the sales ledger and the marts built from it:

- **SalesLedger**: sale records and their line items, with derived totals
  kept consistent on every mutation.

- **marts**: pandas tables at item-line, sale, daily and vegetable grain.

Example:
    >>> from vendor_core.sales import SalesLedger
    >>> from vendor_core.storage import MemorySnapshotStore
    >>>
    >>> ledger = SalesLedger(MemorySnapshotStore())
    >>> sale_id = ledger.create_record("2024-01-01", customer.id, customer)
    >>> ledger.add_item(sale_id, "Tomato", 2, 30)
    >>> ledger.get_by_id(sale_id).total_amount
    60.0
"""

from vendor_core.sales.ledger import SORT_FIELDS, SalesLedger, sort_records
from vendor_core.sales.totals import line_total, sale_total

__all__ = ["SORT_FIELDS", "SalesLedger", "line_total", "sale_total", "sort_records"]
