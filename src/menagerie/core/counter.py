"""
Menagerie Core - Instance Counter

Process-wide tally of entity constructions, shared by every class in the
animal hierarchy.
"""

import threading
from collections import defaultdict
from typing import Dict


class InstanceCounter:
    """
    Thread-safe construction counter.

    Keeps a single running total plus a per-class breakdown. Entities only
    ever increment it; ``reset`` exists for test isolation.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total: int = 0
        self._by_kind: Dict[str, int] = defaultdict(int)

    def increment(self, kind: str) -> int:
        """
        Record one successful construction.

        Args:
            kind: Class name of the constructed entity

        Returns:
            The new total
        """
        with self._lock:
            self._total += 1
            self._by_kind[kind] += 1
            return self._total

    @property
    def total(self) -> int:
        """Current number of constructions."""
        return self._total

    def by_kind(self) -> Dict[str, int]:
        """Get per-class construction counts."""
        with self._lock:
            return dict(self._by_kind)

    def reset(self) -> None:
        """Zero the counter. Useful for testing."""
        with self._lock:
            self._total = 0
            self._by_kind.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(total={self._total})"


# Global counter shared by Animal and its descendants
animal_counter = InstanceCounter()
