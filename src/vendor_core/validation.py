"""Boundary validation for customer and sale input.

The registry and ledger trust their input. Forms and the CLI call these
helpers first; each ``check_*`` returns a ``{field: message}`` dict (empty
when valid) and each ``validate_*`` raises ValidationError with that dict.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Optional, Sequence, Tuple

from vendor_core.exceptions import ValidationError

PHONE_RE = re.compile(r"^\d{10}$")

# (vegetable_name, weight, price_per_unit)
ItemInput = Tuple[str, float, float]


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def check_customer(name: str, phone: str) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not name or not name.strip():
        errors["name"] = "Name is required"
    if not phone or not phone.strip():
        errors["phone"] = "Phone number is required"
    elif not PHONE_RE.match(phone.strip()):
        errors["phone"] = "Phone must be 10 digits"
    return errors


def check_item(vegetable_name: str, weight: float, price_per_unit: float) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not vegetable_name or not vegetable_name.strip():
        errors["vegetableName"] = "Vegetable name is required"
    if not _positive(weight):
        errors["weight"] = "Weight must be greater than 0"
    if not _positive(price_per_unit):
        errors["pricePerUnit"] = "Price must be greater than 0"
    return errors


def check_sale(
    date: Optional[str],
    customer_id: Optional[str],
    items: Sequence[ItemInput],
) -> dict[str, str]:
    """Validate a whole sale form.

    Item errors are reported as ``items[<index>].<field>``.
    """
    errors: dict[str, str] = {}
    if not date:
        errors["date"] = "Date is required"
    else:
        try:
            datetime.strptime(date, "%Y-%m-%d")
        except ValueError:
            errors["date"] = f"Date must be YYYY-MM-DD. Got '{date}'."
    if not customer_id:
        errors["customerId"] = "Please select a customer"
    if not items:
        errors["items"] = "At least one item is required"
    for index, (name, weight, price) in enumerate(items):
        for field, message in check_item(name, weight, price).items():
            errors[f"items[{index}].{field}"] = message
    return errors


def validate_customer(name: str, phone: str) -> None:
    """Raise ValidationError if the customer fields are invalid."""
    errors = check_customer(name, phone)
    if errors:
        raise ValidationError(errors)


def validate_sale(
    date: Optional[str],
    customer_id: Optional[str],
    items: Sequence[ItemInput],
) -> None:
    """Raise ValidationError if the sale form is invalid."""
    errors = check_sale(date, customer_id, items)
    if errors:
        raise ValidationError(errors)
