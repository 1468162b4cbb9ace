"""Vendor Core - record keeping for a single vegetable vendor.

This package keeps customers and per-day sale records (each made of
vegetable line items) and derives a dashboard summary from them.

Module Structure:
    vendor_core.customers: CustomerRegistry (create/update/delete/lookup)
    vendor_core.sales: SalesLedger (records + line items, derived totals) and marts
    vendor_core.dashboard: Pure dashboard functions (today's total, best seller, ...)
    vendor_core.qa: Ledger consistency checks
    vendor_core.storage: Snapshot stores (memory, JSON files)
    vendor_core.config: StoragePaths and DisplayConfig

Quick Start:
    >>> from vendor_core import StoragePaths, VendorApp
    >>>
    >>> app = VendorApp.from_paths(StoragePaths.from_root("data"))
    >>> cid = app.add_customer("Asha", "9000000001")
    >>> sale_id = app.ledger.create_record("2024-01-01", cid, app.registry.get_by_id(cid))
    >>> app.ledger.add_item(sale_id, "Tomato", 2, 30)
    >>> app.dashboard(today="2024-01-01").todays_total
    60.0

Derived fields:
    - LineItem.total_price == weight * price_per_unit
    - SaleRecord.total_amount == sum(items[].total_price)
"""

__version__ = "0.1.0"

from vendor_core.app import VendorApp, ViewSelector
from vendor_core.config import DisplayConfig, StoragePaths
from vendor_core.exceptions import (
    ConfigError,
    DataQualityError,
    PersistenceError,
    ValidationError,
    VendorAPIError,
)
from vendor_core.models import Customer, LineItem, SaleRecord

__all__ = [
    "ConfigError",
    "Customer",
    "DataQualityError",
    "DisplayConfig",
    "LineItem",
    "PersistenceError",
    "SaleRecord",
    "StoragePaths",
    "ValidationError",
    "VendorAPIError",
    "VendorApp",
    "ViewSelector",
    "__version__",
]
