"""Application wiring: one store, one registry, one ledger.

``VendorApp`` is what a presentation layer (or the CLI) talks to. It
exposes the two collections read-only, forwards mutations, and offers a
few form-level helpers that validate before touching the core.

UI navigation state lives in ``ViewSelector``, which callers create and
pass around themselves; it is never persisted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from vendor_core.config import DisplayConfig, StoragePaths
from vendor_core.customers.registry import CustomerRegistry
from vendor_core.dashboard.api import DashboardSummary, build_dashboard
from vendor_core.exceptions import ValidationError
from vendor_core.ids import IdGenerator, new_id
from vendor_core.models import Customer, LineItem, SaleRecord
from vendor_core.qa.api import LedgerQAResult, run_ledger_qa
from vendor_core.sales.ledger import SalesLedger
from vendor_core.sales.totals import line_total
from vendor_core.storage import JsonSnapshotStore, SnapshotStore
from vendor_core.validation import ItemInput, check_item, validate_customer, validate_sale

logger = logging.getLogger(__name__)

VIEWS = ("dashboard", "sales", "customers")


@dataclass
class ViewSelector:
    """Which of the three views is showing."""

    current: str = "dashboard"

    def select(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Invalid view '{view}'. Must be one of {VIEWS}.")
        self.current = view


class VendorApp:
    """Facade over the customer registry and the sales ledger.

    Example:
        >>> app = VendorApp.from_paths(StoragePaths.from_root("data"))
        >>> cid = app.add_customer("Asha", "9000000001")
        >>> sale_id = app.record_sale("2024-01-01", cid, [("Tomato", 2, 30)])
        >>> app.dashboard(today="2024-01-01").todays_total
        60.0

    """

    def __init__(
        self,
        store: SnapshotStore,
        *,
        id_generator: IdGenerator = new_id,
        display: Optional[DisplayConfig] = None,
    ) -> None:
        self.store = store
        self.display = display or DisplayConfig()
        self.registry = CustomerRegistry(store, id_generator=id_generator)
        self.ledger = SalesLedger(store, id_generator=id_generator)

    @classmethod
    def from_paths(cls, paths: StoragePaths, **kwargs) -> VendorApp:
        """Create an app persisting to JSON snapshots under ``paths``."""
        paths.ensure_dirs()
        return cls(JsonSnapshotStore(paths), **kwargs)

    # -- read accessors ----------------------------------------------------

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return self.registry.customers

    @property
    def sales(self) -> Tuple[SaleRecord, ...]:
        return self.ledger.records

    # -- form helpers ------------------------------------------------------

    def add_customer(self, name: str, phone: str, address: Optional[str] = None) -> str:
        """Validate and create a customer; blank addresses are stored as None."""
        validate_customer(name, phone)
        address = address.strip() if address else None
        return self.registry.create(name.strip(), phone.strip(), address or None)

    def update_customer(
        self,
        customer_id: str,
        name: str,
        phone: str,
        address: Optional[str] = None,
    ) -> bool:
        """Validate and replace a customer's details. False if the id is unknown.

        Existing sales keep the customer copy they were recorded with.
        """
        validate_customer(name, phone)
        address = address.strip() if address else None
        customer = Customer(
            id=customer_id,
            name=name.strip(),
            phone=phone.strip(),
            address=address or None,
        )
        return self.registry.update(customer)

    def add_sale_item(self, sale_id: str, item: ItemInput) -> Optional[str]:
        """Validate and append one item to a sale; None if the sale is unknown."""
        name, weight, price = item
        _validate_item(item)
        return self.ledger.add_item(sale_id, name.strip(), float(weight), float(price))

    def update_sale_item(self, sale_id: str, item_id: str, item: ItemInput) -> bool:
        """Validate and replace one item of a sale; totals are recomputed."""
        name, weight, price = item
        _validate_item(item)
        line_item = LineItem(
            id=item_id,
            vegetable_name=name.strip(),
            weight=float(weight),
            price_per_unit=float(price),
        )
        return self.ledger.update_item(sale_id, line_item)

    def record_sale(self, date: str, customer_id: str, items: Sequence[ItemInput]) -> str:
        """Validate a sale form and create the record with priced items.

        Raises:
            ValidationError: If the form is invalid or the customer does not exist.
        """
        customer = self.registry.get_by_id(customer_id) if customer_id else None
        validate_sale(date, customer.id if customer else None, items)

        line_items = [
            LineItem(
                id=self.ledger.new_id(),
                vegetable_name=name.strip(),
                weight=float(weight),
                price_per_unit=float(price),
                total_price=line_total(float(weight), float(price)),
            )
            for name, weight, price in items
        ]
        return self.ledger.create_record(date, customer.id, customer, line_items)

    # -- derived views -----------------------------------------------------

    def dashboard(self, today: Optional[str] = None) -> DashboardSummary:
        return build_dashboard(
            self.ledger.records,
            len(self.registry),
            today=today,
            recent=self.display.recent_sales,
        )

    def qa(self) -> LedgerQAResult:
        return run_ledger_qa(self.ledger.records, self.registry.customers)

    @property
    def persist_errors(self) -> list:
        """Outstanding persistence failures, newest state per collection."""
        return [
            err
            for err in (self.registry.last_persist_error, self.ledger.last_persist_error)
            if err is not None
        ]


def _validate_item(item: ItemInput) -> None:
    errors = check_item(*item)
    if errors:
        raise ValidationError(errors)
