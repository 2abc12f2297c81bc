"""Helpers producing dense, order-preserving lists."""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any


def append_unique(sequence: Iterable[Any] | None, value: Any) -> list[Any]:
    """
    Append a value to a sequence unless it is already present.

    The result is always rebuilt as a new list: duplicates already present in
    ``sequence`` are collapsed (first occurrence wins) and positions are
    contiguous and zero-based.

    Args:
        sequence: Existing values, or None when there are none yet
        value: Value to append

    Returns:
        A new dense list containing every distinct value in original order
    """
    items = list(sequence) if sequence is not None else []
    items.append(value)
    return list(dict.fromkeys(items))


def dense_values(values: Mapping[Any, Any] | Iterable[Any]) -> list[Any]:
    """
    Return the values of a collection as a dense list.

    Mapping keys are dropped; only values are kept, in key order. An Enum
    class yields the values of its members.
    """
    if isinstance(values, type) and issubclass(values, Enum):
        return [member.value for member in values]
    if isinstance(values, Mapping):
        return list(values.values())
    return list(values)
