"""
Array deduplication.

Keeps the first occurrence of every value. Hashable values are tracked in a
set; unhashable ones (lists, dicts) fall back to an equality scan.
"""

from typing import Any, Iterable, List, TypeVar

T = TypeVar("T")


def unique_values(values: Iterable[T]) -> List[T]:
    """
    Drop repeated values, preserving first-occurrence order.

    Values are compared with Python equality, so ``1``, ``1.0`` and ``True``
    are the same value: ``unique_values([1, True, 0, False])`` gives
    ``[1, 0]``.
    """
    seen = set()
    unhashable: List[Any] = []
    result: List[T] = []

    for value in values:
        try:
            if value in seen:
                continue
            seen.add(value)
        except TypeError:
            if value in unhashable:
                continue
            unhashable.append(value)
        result.append(value)

    return result
