# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def dedupe_preserve[T](values: Iterable[T]) -> list[T]:
    """Return items in order, dropping subsequent duplicates.

    Hashable values are tracked in a seen-set. Unhashable values (lists,
    dicts, ...) fall back to an equality scan over the unhashable values
    kept so far, so the two groups are never compared with each other.

    Args:
        values: Iterable of equality-comparable items whose first occurrence
            should be preserved.

    Returns:
        A list containing the first appearance of each unique value, ordered by
        the original traversal.
    """
    seen: set[object] = set()
    unhashable: list[T] = []
    result: list[T] = []
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


def require_callable(value: object) -> bool:
    """Return True when value can be invoked as a callback."""
    return value is not None and callable(value)
