"""Snapshot-replace collection shared by the customer registry and sales ledger.

Each mutation runs under the collection's lock: read the current tuple,
derive a new one, publish it, then hand the serialized snapshot to the
store. A store failure is logged and remembered; the in-memory snapshot
stays authoritative for the rest of the session.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

from vendor_core.exceptions import PersistenceError
from vendor_core.ids import IdGenerator, new_id
from vendor_core.storage import SnapshotStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotCollection(Generic[T]):
    """Base class for an id-keyed collection persisted as one slot."""

    slot: str = ""

    def __init__(
        self,
        store: SnapshotStore,
        *,
        id_generator: IdGenerator = new_id,
        default: Iterable[T] = (),
    ) -> None:
        self.store = store
        self.new_id = id_generator
        self.last_persist_error: Optional[PersistenceError] = None
        self._lock = threading.Lock()

        raw = store.load(self.slot, [self._to_dict(entity) for entity in default])
        if not isinstance(raw, list):
            raise PersistenceError(self.slot, f"expected a list of entities, got {type(raw).__name__}")
        try:
            self._snapshot: Tuple[T, ...] = tuple(self._from_dict(data) for data in raw)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise PersistenceError(self.slot, f"malformed entity: {e!r}") from e
        logger.debug("Loaded %d entities from slot %s", len(self._snapshot), self.slot)

    # -- hooks -------------------------------------------------------------

    def _to_dict(self, entity: T) -> dict[str, Any]:
        raise NotImplementedError

    def _from_dict(self, data: dict[str, Any]) -> T:
        raise NotImplementedError

    # -- snapshot ----------------------------------------------------------

    @property
    def snapshot(self) -> Tuple[T, ...]:
        return self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def __iter__(self):
        return iter(self._snapshot)

    def _find(self, entity_id: str) -> Optional[T]:
        return next((e for e in self._snapshot if e.id == entity_id), None)  # type: ignore[attr-defined]

    def _mutate(self, derive: Callable[[Tuple[T, ...]], Tuple[T, ...]]) -> bool:
        """Apply ``derive`` to the current snapshot and publish the result.

        Returns False (and publishes nothing) when ``derive`` returns the
        same tuple object, i.e. the target was not found.
        """
        with self._lock:
            current = self._snapshot
            updated = derive(current)
            if updated is current:
                return False
            self._snapshot = updated
            self._persist(updated)
        return True

    def _persist(self, snapshot: Tuple[T, ...]) -> None:
        try:
            self.store.save(self.slot, [self._to_dict(entity) for entity in snapshot])
        except PersistenceError as e:
            logger.warning("Could not persist %s, keeping in-memory snapshot: %s", self.slot, e)
            self.last_persist_error = e
        else:
            self.last_persist_error = None


def replace_by_id(snapshot: Tuple[T, ...], entity_id: str, replacement: T) -> Tuple[T, ...]:
    """Return a new tuple with the entity ``entity_id`` swapped for ``replacement``.

    Returns ``snapshot`` itself when no entity matches.
    """
    if not any(e.id == entity_id for e in snapshot):  # type: ignore[attr-defined]
        return snapshot
    return tuple(replacement if e.id == entity_id else e for e in snapshot)  # type: ignore[attr-defined]


def remove_by_id(snapshot: Tuple[T, ...], entity_id: str) -> Tuple[T, ...]:
    """Return a new tuple without ``entity_id``, or ``snapshot`` when absent."""
    if not any(e.id == entity_id for e in snapshot):  # type: ignore[attr-defined]
        return snapshot
    return tuple(e for e in snapshot if e.id != entity_id)  # type: ignore[attr-defined]
