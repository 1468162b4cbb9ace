"""Sales ledger: sale records and the line items inside them.

The ledger keeps two derived fields consistent after every mutation:

- ``LineItem.total_price == weight * price_per_unit`` (recomputed on every
  item add/update, caller-supplied values are ignored)
- ``SaleRecord.total_amount == sum(items[].total_price)`` (recomputed on
  every item add/update/delete)

``create_record`` and ``update_record`` take items as given and only
recompute (create) or keep (update) the record total; pricing the items is
the caller's job there.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional, Sequence, Tuple

from vendor_core.collection import SnapshotCollection, remove_by_id, replace_by_id
from vendor_core.models import Customer, LineItem, SaleRecord
from vendor_core.sales.totals import line_total, priced, sale_total, with_items
from vendor_core.storage import SALES_SLOT

logger = logging.getLogger(__name__)

SORT_FIELDS = ("date", "customer", "totalAmount")


class SalesLedger(SnapshotCollection[SaleRecord]):
    """Owns the sale records and their line items.

    Every operation addressing an unknown sale or item id is a no-op that
    returns False (``add_item`` returns None).
    """

    slot = SALES_SLOT

    def _to_dict(self, entity: SaleRecord) -> dict[str, Any]:
        return entity.to_dict()

    def _from_dict(self, data: dict[str, Any]) -> SaleRecord:
        return SaleRecord.from_dict(data)

    @property
    def records(self) -> Tuple[SaleRecord, ...]:
        return self.snapshot

    def get_by_id(self, sale_id: str) -> Optional[SaleRecord]:
        return self._find(sale_id)

    # -- records -----------------------------------------------------------

    def create_record(
        self,
        date: str,
        customer_id: str,
        customer: Customer,
        items: Iterable[LineItem] = (),
    ) -> str:
        """Add a sale record and return its id.

        ``customer`` is stored as a point-in-time copy.
        """
        items = tuple(items)
        record = SaleRecord(
            id=self.new_id(),
            date=date,
            customer_id=customer_id,
            customer=customer,
            items=items,
            total_amount=sale_total(items),
        )
        self._mutate(lambda current: current + (record,))
        logger.info(
            "Created sale %s on %s for customer %s (%d items, total %.2f)",
            record.id,
            date,
            customer_id,
            len(items),
            record.total_amount,
        )
        return record.id

    def update_record(self, record: SaleRecord) -> bool:
        """Replace the stored record with the same id.

        Items are stored as a tuple whatever sequence the caller passed.
        """
        record = replace(record, items=tuple(record.items))
        applied = self._mutate(lambda current: replace_by_id(current, record.id, record))
        if not applied:
            logger.debug("update_record ignored: no sale %s", record.id)
        return applied

    def delete_record(self, sale_id: str) -> bool:
        """Remove a record together with all of its items."""
        applied = self._mutate(lambda current: remove_by_id(current, sale_id))
        if applied:
            logger.info("Deleted sale %s", sale_id)
        else:
            logger.debug("delete_record ignored: no sale %s", sale_id)
        return applied

    # -- items -------------------------------------------------------------

    def add_item(
        self,
        sale_id: str,
        vegetable_name: str,
        weight: float,
        price_per_unit: float,
    ) -> Optional[str]:
        """Append a line item to a sale and return the item id."""
        item = LineItem(
            id=self.new_id(),
            vegetable_name=vegetable_name,
            weight=weight,
            price_per_unit=price_per_unit,
            total_price=line_total(weight, price_per_unit),
        )

        def derive(current: Tuple[SaleRecord, ...]) -> Tuple[SaleRecord, ...]:
            record = _lookup(current, sale_id)
            if record is None:
                return current
            return replace_by_id(current, sale_id, with_items(record, record.items + (item,)))

        if not self._mutate(derive):
            logger.debug("add_item ignored: no sale %s", sale_id)
            return None
        logger.debug("Added item %s (%s) to sale %s", item.id, vegetable_name, sale_id)
        return item.id

    def update_item(self, sale_id: str, item: LineItem) -> bool:
        """Replace an item by id; its total_price is recomputed from weight and price."""
        updated_item = priced(item)

        def derive(current: Tuple[SaleRecord, ...]) -> Tuple[SaleRecord, ...]:
            record = _lookup(current, sale_id)
            if record is None or record.find_item(item.id) is None:
                return current
            items = tuple(updated_item if i.id == item.id else i for i in record.items)
            return replace_by_id(current, sale_id, with_items(record, items))

        applied = self._mutate(derive)
        if not applied:
            logger.debug("update_item ignored: no item %s in sale %s", item.id, sale_id)
        return applied

    def delete_item(self, sale_id: str, item_id: str) -> bool:
        """Remove an item from a sale and recompute the sale total.

        An unknown item id on a known sale still recomputes the total over
        the unchanged items (and returns True).
        """

        def derive(current: Tuple[SaleRecord, ...]) -> Tuple[SaleRecord, ...]:
            record = _lookup(current, sale_id)
            if record is None:
                return current
            items = tuple(i for i in record.items if i.id != item_id)
            return replace_by_id(current, sale_id, with_items(record, items))

        applied = self._mutate(derive)
        if not applied:
            logger.debug("delete_item ignored: no sale %s", sale_id)
        return applied

    # -- queries -----------------------------------------------------------

    def filter(self, search: str = "", date: Optional[str] = None) -> list[SaleRecord]:
        """Records matching a search term and/or an exact date.

        The term matches the customer name or any vegetable name, ignoring case.
        """
        needle = search.strip().lower()
        matches = []
        for record in self.snapshot:
            if date and record.date != date:
                continue
            if needle and not (
                needle in record.customer.name.lower()
                or any(needle in item.vegetable_name.lower() for item in record.items)
            ):
                continue
            matches.append(record)
        return matches


def sort_records(
    records: Sequence[SaleRecord],
    field: str = "date",
    descending: bool = True,
) -> list[SaleRecord]:
    """Sort records by ``date``, ``customer`` (name) or ``totalAmount``.

    Raises:
        ValueError: If field is not one of SORT_FIELDS.
    """
    if field not in SORT_FIELDS:
        raise ValueError(f"Invalid sort field '{field}'. Must be one of {SORT_FIELDS}.")

    if field == "date":
        key = lambda r: r.date  # noqa: E731
    elif field == "customer":
        key = lambda r: r.customer.name.lower()  # noqa: E731
    else:
        key = lambda r: r.total_amount  # noqa: E731

    return sorted(records, key=key, reverse=descending)


def _lookup(snapshot: Tuple[SaleRecord, ...], sale_id: str) -> Optional[SaleRecord]:
    return next((r for r in snapshot if r.id == sale_id), None)
