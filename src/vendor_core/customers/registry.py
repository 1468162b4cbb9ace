"""Customer registry: create, update, delete and look up customers."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

from vendor_core.collection import SnapshotCollection, remove_by_id, replace_by_id
from vendor_core.ids import IdGenerator, new_id
from vendor_core.models import DEFAULT_CUSTOMERS, Customer
from vendor_core.storage import CUSTOMERS_SLOT, SnapshotStore

logger = logging.getLogger(__name__)


class CustomerRegistry(SnapshotCollection[Customer]):
    """Owns the customer collection.

    Duplicate names or phones are allowed. Update and delete on an unknown
    id are no-ops and return False.

    Example:
        >>> registry = CustomerRegistry(MemorySnapshotStore())
        >>> cid = registry.create("A", "1234567890")
        >>> registry.get_by_id(cid).name
        'A'

    """

    slot = CUSTOMERS_SLOT

    def __init__(
        self,
        store: SnapshotStore,
        *,
        id_generator: IdGenerator = new_id,
        default: Iterable[Customer] = DEFAULT_CUSTOMERS,
    ) -> None:
        super().__init__(store, id_generator=id_generator, default=default)

    def _to_dict(self, entity: Customer) -> dict[str, Any]:
        return entity.to_dict()

    def _from_dict(self, data: dict[str, Any]) -> Customer:
        return Customer.from_dict(data)

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return self.snapshot

    def create(self, name: str, phone: str, address: Optional[str] = None) -> str:
        """Add a customer and return its new id."""
        customer = Customer(id=self.new_id(), name=name, phone=phone, address=address)
        self._mutate(lambda current: current + (customer,))
        logger.info("Created customer %s (%s)", customer.id, customer.name)
        return customer.id

    def update(self, customer: Customer) -> bool:
        """Replace the stored customer with the same id."""
        applied = self._mutate(lambda current: replace_by_id(current, customer.id, customer))
        if not applied:
            logger.debug("update ignored: no customer %s", customer.id)
        return applied

    def delete(self, customer_id: str) -> bool:
        """Remove a customer. Sale records keep their own customer copy."""
        applied = self._mutate(lambda current: remove_by_id(current, customer_id))
        if applied:
            logger.info("Deleted customer %s", customer_id)
        else:
            logger.debug("delete ignored: no customer %s", customer_id)
        return applied

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._find(customer_id)

    def search(self, term: str = "") -> list[Customer]:
        """Customers whose name contains ``term`` (any case) or whose phone contains it."""
        needle = term.strip().lower()
        if not needle:
            return list(self.snapshot)
        return [c for c in self.snapshot if needle in c.name.lower() or needle in c.phone]
