# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from collections.abc import Callable

from hypothesis import strategies as st

__all__ = ["int_lists", "predicates", "small_ints", "str_lists"]


def small_ints(max_value: int = 20) -> st.SearchStrategy[int]:
    """Return a narrow integer range so generated lists contain duplicates."""
    return st.integers(min_value=-max_value, max_value=max_value)


def int_lists(max_size: int = 50) -> st.SearchStrategy[list[int]]:
    """Return a strategy for short integer lists with frequent repeats."""
    return st.lists(small_ints(), max_size=max_size)


def str_lists(max_size: int = 20) -> st.SearchStrategy[list[str]]:
    """Return a strategy for lists of short strings drawn from a small alphabet."""
    return st.lists(st.text(alphabet="abc", max_size=3), max_size=max_size)


def predicates() -> st.SearchStrategy[Callable[[int], bool]]:
    """Strategy emitting simple integer predicates.

    Returns:
        Hypothesis strategy producing modulus- and threshold-based predicates.
    """
    modulus = st.integers(min_value=1, max_value=5).map(
        lambda m: lambda value: value % m == 0,
    )
    threshold = small_ints().map(lambda t: lambda value: value > t)
    return st.one_of(modulus, threshold)
