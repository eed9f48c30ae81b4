"""
Keyed entity storage.

Services never touch a bare dict: they go through a KeyValueStore, which
provides the atomic primitives the auth and checkout flows rely on
(add-if-absent, compare-and-set, and per-key locking). InMemoryStore is the
process-local implementation; a persistent backend would implement the same
protocol with transactions or version columns.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, Protocol, TypeVar, runtime_checkable


T = TypeVar("T")

DEFAULT_LOCK_STRIPES = 64


@runtime_checkable
class KeyValueStore(Protocol[T]):
    """
    Interface for a keyed collection of entities.

    Every single-key operation is atomic. Multi-step read-modify-write
    sequences must run inside ``lock(key)``.
    """

    def get(self, key: str) -> Optional[T]:
        ...

    def set(self, key: str, value: T) -> None:
        ...

    def delete(self, key: str) -> bool:
        ...

    def add_if_absent(self, key: str, value: T) -> T:
        """Store value unless the key exists; return whichever value is stored."""
        ...

    def compare_and_set(self, key: str, expected: Optional[T], new: T) -> bool:
        """Replace the value only if the current value is ``expected``."""
        ...

    def keys(self) -> list[str]:
        ...

    def values(self) -> list[T]:
        ...

    def clear(self) -> None:
        ...

    def lock(self, *keys: str):
        """Context manager holding the locks for all given keys."""
        ...

    def __len__(self) -> int:
        ...


class InMemoryStore(Generic[T]):
    """
    Thread-safe in-memory implementation of KeyValueStore.

    Key locks are striped: a fixed pool of re-entrant locks indexed by key
    hash, so lock memory stays bounded as keys are created and deleted.
    Multi-key acquisition always takes stripes in ascending index order.
    """

    def __init__(self, lock_stripes: int = DEFAULT_LOCK_STRIPES) -> None:
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be at least 1")
        self._data: dict[str, T] = {}
        self._guard = threading.RLock()
        self._stripes = [threading.RLock() for _ in range(lock_stripes)]

    def get(self, key: str) -> Optional[T]:
        with self._guard:
            return self._data.get(key)

    def set(self, key: str, value: T) -> None:
        with self._guard:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._guard:
            return self._data.pop(key, None) is not None

    def add_if_absent(self, key: str, value: T) -> T:
        with self._guard:
            return self._data.setdefault(key, value)

    def compare_and_set(self, key: str, expected: Optional[T], new: T) -> bool:
        with self._guard:
            if self._data.get(key) is not expected:
                return False
            self._data[key] = new
            return True

    def keys(self) -> list[str]:
        with self._guard:
            return list(self._data.keys())

    def values(self) -> list[T]:
        with self._guard:
            return list(self._data.values())

    def clear(self) -> None:
        with self._guard:
            self._data.clear()

    def __len__(self) -> int:
        with self._guard:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._guard:
            return key in self._data

    @contextmanager
    def lock(self, *keys: str) -> Iterator[None]:
        indices = sorted({hash(key) % len(self._stripes) for key in keys})
        acquired: list[threading.RLock] = []
        try:
            for index in indices:
                stripe = self._stripes[index]
                stripe.acquire()
                acquired.append(stripe)
            yield
        finally:
            for stripe in reversed(acquired):
                stripe.release()


@dataclass
class EntityStore:
    """The process-wide collections: products, users and authorization codes."""

    products: InMemoryStore = field(default_factory=InMemoryStore)
    users: InMemoryStore = field(default_factory=InMemoryStore)
    auth_codes: InMemoryStore = field(default_factory=InMemoryStore)

    def stats(self) -> dict[str, int]:
        return {
            "products": len(self.products),
            "users": len(self.users),
            "auth_codes": len(self.auth_codes),
        }

    def clear(self) -> None:
        self.products.clear()
        self.users.clear()
        self.auth_codes.clear()
