"""Core entities: customers, sale records and their line items.

All entities are frozen dataclasses. Mutations never edit an instance in
place; the registry and ledger build replacements with
``dataclasses.replace`` and publish a new snapshot tuple.

The dict form uses the camelCase keys of the stored snapshot
(``vegetableName``, ``pricePerUnit``, ``totalPrice``, ``customerId``,
``totalAmount``), so snapshots written by the original vendor app load
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Customer:
    """A customer of the vendor.

    Attributes:
        id: Opaque unique id, assigned at creation.
        name: Display name.
        phone: 10-digit phone number (validated at the boundary).
        address: Optional free text.
    """

    id: str
    name: str
    phone: str
    address: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "phone": self.phone}
        if self.address is not None:
            data["address"] = self.address
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Customer:
        return cls(
            id=str(data["id"]),
            name=data["name"],
            phone=str(data["phone"]),
            address=data.get("address"),
        )


@dataclass(frozen=True)
class LineItem:
    """One vegetable entry within a sale record.

    ``total_price`` is derived (weight x price_per_unit). The ledger
    recomputes it on every add/update; ``from_dict`` keeps the stored
    value since loading a snapshot is not a mutation.
    """

    id: str
    vegetable_name: str
    weight: float
    price_per_unit: float
    total_price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "vegetableName": self.vegetable_name,
            "weight": self.weight,
            "pricePerUnit": self.price_per_unit,
            "totalPrice": self.total_price,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LineItem:
        weight = float(data["weight"])
        price = float(data["pricePerUnit"])
        return cls(
            id=str(data["id"]),
            vegetable_name=data["vegetableName"],
            weight=weight,
            price_per_unit=price,
            total_price=float(data.get("totalPrice", weight * price)),
        )


@dataclass(frozen=True)
class SaleRecord:
    """A sale on a given day to one customer.

    Attributes:
        id: Opaque unique id.
        date: Calendar date as ``YYYY-MM-DD``.
        customer_id: Id of the customer in the registry.
        customer: Point-in-time copy of the customer (not a live link).
        items: Line items in display order.
        total_amount: Sum of the items' total_price.
    """

    id: str
    date: str
    customer_id: str
    customer: Customer
    items: Tuple[LineItem, ...] = field(default_factory=tuple)
    total_amount: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "customerId": self.customer_id,
            "customer": self.customer.to_dict(),
            "items": [item.to_dict() for item in self.items],
            "totalAmount": self.total_amount,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SaleRecord:
        items = tuple(LineItem.from_dict(item) for item in data.get("items", []))
        return cls(
            id=str(data["id"]),
            date=data["date"],
            customer_id=str(data["customerId"]),
            customer=Customer.from_dict(data["customer"]),
            items=items,
            total_amount=float(data.get("totalAmount", sum(i.total_price for i in items))),
        )

    def find_item(self, item_id: str) -> Optional[LineItem]:
        return next((item for item in self.items if item.id == item_id), None)


# Seed list used when the customer slot is empty (first run).
DEFAULT_CUSTOMERS: Tuple[Customer, ...] = (
    Customer(id="1", name="Rajesh Kumar", phone="9876543210", address="Market Area, Delhi"),
    Customer(id="2", name="Priya Sharma", phone="8765432109", address="Gandhi Road, Mumbai"),
    Customer(id="3", name="Amit Patel", phone="7654321098", address="Vegetable Market, Ahmedabad"),
    Customer(id="4", name="Sunita Verma", phone="6543210987", address="Main Bazaar, Jaipur"),
    Customer(id="5", name="Mohammed Khan", phone="5432109876", address="Wholesale Market, Lucknow"),
    Customer(id="6", name="Lakshmi Rao", phone="4321098765", address="Market Complex, Bangalore"),
)
