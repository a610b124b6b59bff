"""
Base Repository

Abstract base class for the in-memory stores.
State lives in a plain dict owned by the repository; nothing is persisted.

Implements:
- DIP: Services depend on these store interfaces
- ISP: Minimal interface, specific stores extend it
"""

from abc import ABC
from typing import TypeVar, Generic, Dict

K = TypeVar('K')
V = TypeVar('V')


class BaseRepository(ABC, Generic[K, V]):
    """
    Abstract base repository backed by a dict

    Generic[K, V]: K is the key type, V the stored value type

    Locking is not done here. Callers hold AppState.lock.
    """

    def __init__(self):
        self._items: Dict[K, V] = {}

    def count(self) -> int:
        """Number of stored entries"""
        return len(self._items)

    def __contains__(self, key: K) -> bool:
        return key in self._items

    def clear(self):
        """
        Drop every entry

        Only used by tests and by AppState.reset()
        """
        self._items.clear()
