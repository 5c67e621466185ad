"""
Array flattening.

Lists and tuples count as nested sequences. Strings, bytes and every other
value are leaves.
"""

from typing import Any, Iterable, List, Optional

NESTED_TYPES = (list, tuple)


def flatten(nested: Iterable[Any], depth: Optional[int] = None) -> List[Any]:
    """
    Flatten nested sequences depth-first, keeping element order.

    Args:
        nested: Sequence that may contain nested lists or tuples
        depth: How many levels to remove; ``None`` removes all of them

    Returns:
        Flat list of the leaves

    Raises:
        ValueError: If ``depth`` is negative
    """
    if depth is not None and depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    result: List[Any] = []
    _flatten_into(result, nested, depth)
    return result


def _flatten_into(result: List[Any], items: Iterable[Any], depth: Optional[int]) -> None:
    for item in items:
        if isinstance(item, NESTED_TYPES) and (depth is None or depth > 0):
            _flatten_into(result, item, None if depth is None else depth - 1)
        else:
            result.append(item)
