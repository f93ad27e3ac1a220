"""
In-memory ledger shared by the appointment, prescription and record stores.

State lives for the lifetime of the process. Every read and write takes the
store lock, which the unit of work also holds while it publishes a cascade,
so a reader never sees half of a multi-entity write.
"""

import copy
import threading
import uuid
from typing import Dict, Generic, List, Optional, Set, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


def new_store_lock() -> threading.RLock:
    return threading.RLock()


class InMemoryLedger(Generic[T]):
    """Insertion-ordered collection of entities keyed by an opaque id."""

    def __init__(self, lock: Optional[threading.RLock] = None) -> None:
        self.lock = lock or new_store_lock()
        self._items: Dict[str, T] = {}
        self._issued: Set[str] = set()

    def new_id(self) -> str:
        """Return an id never handed out by this ledger before."""
        with self.lock:
            while True:
                candidate = uuid.uuid4().hex
                if candidate not in self._issued:
                    self._issued.add(candidate)
                    return candidate

    def get_by_id(self, entity_id: str) -> Optional[T]:
        with self.lock:
            entity = self._items.get(entity_id)
            return copy.copy(entity) if entity is not None else None

    def list_all(self) -> List[T]:
        with self.lock:
            return [copy.copy(entity) for entity in self._items.values()]

    def count(self) -> int:
        with self.lock:
            return len(self._items)

    def add(self, entity: T) -> T:
        with self.lock:
            entity_id = getattr(entity, "id")
            if not entity_id:
                raise ValidationError("Entity id is required")
            if entity_id in self._items:
                raise ValidationError(f"Duplicate id: {entity_id}")
            self._issued.add(entity_id)
            self._items[entity_id] = copy.copy(entity)
            return copy.copy(entity)

    def _set_status(self, entity_id: str, status: str) -> Optional[T]:
        with self.lock:
            entity = self._items.get(entity_id)
            if entity is None:
                return None
            entity.status = status
            return copy.copy(entity)

    def _remove(self, entity_id: str) -> bool:
        # The id stays in _issued so it is never handed out again
        with self.lock:
            return self._items.pop(entity_id, None) is not None
