"""Customers domain module.

Example:
    >>> from vendor_core.customers import CustomerRegistry
    >>> from vendor_core.storage import MemorySnapshotStore
    >>>
    >>> registry = CustomerRegistry(MemorySnapshotStore())
    >>> cid = registry.create("Asha", "9000000001", address="Stall 4")
    >>> registry.search("asha")[0].id == cid
    True
"""

from vendor_core.customers.registry import CustomerRegistry

__all__ = ["CustomerRegistry"]
