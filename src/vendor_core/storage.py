"""Snapshot stores for the customer and sales collections.

A snapshot store keeps one JSON-like value per named slot. The registry
and ledger load their slot once at start-up and save the whole collection
after every mutation. Two slots are used:

- ``customers``: list of customer dicts
- ``salesRecords``: list of sale record dicts (items and customer copy embedded)
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from vendor_core.config import StoragePaths
from vendor_core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

CUSTOMERS_SLOT = "customers"
SALES_SLOT = "salesRecords"


class SnapshotStore(Protocol):
    """Key-value store holding one snapshot per slot.

    ``save`` is fire-and-forget from the caller's point of view; a store
    that cannot write raises PersistenceError.
    """

    def load(self, slot: str, default: Any) -> Any: ...

    def save(self, slot: str, value: Any) -> None: ...


class MemorySnapshotStore:
    """Dict-backed store. Values are deep-copied on the way in and out."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._slots: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, slot: str, default: Any) -> Any:
        if slot not in self._slots:
            return copy.deepcopy(default)
        return copy.deepcopy(self._slots[slot])

    def save(self, slot: str, value: Any) -> None:
        self._slots[slot] = copy.deepcopy(value)

    def __contains__(self, slot: str) -> bool:
        return slot in self._slots


class JsonSnapshotStore:
    """One ``<slot>.json`` file per slot under ``paths.snapshots``.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace`` so a crash never leaves a half-written snapshot.
    """

    def __init__(self, paths: StoragePaths) -> None:
        self.paths = paths

    def slot_path(self, slot: str) -> Path:
        return self.paths.snapshots / f"{slot}.json"

    def load(self, slot: str, default: Any) -> Any:
        path = self.slot_path(slot)
        if not path.exists():
            logger.debug("No snapshot for slot %s, using default", slot)
            return copy.deepcopy(default)

        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(slot, f"cannot read {path}: {e}") from e

    def save(self, slot: str, value: Any) -> None:
        path = self.slot_path(slot)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{slot}.", suffix=".tmp", dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(value, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(slot, f"cannot write {path}: {e}") from e

        logger.debug("Wrote snapshot: %s", path)
