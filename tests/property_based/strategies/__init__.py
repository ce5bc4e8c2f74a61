# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common Hypothesis strategies."""

from __future__ import annotations

from .common import int_lists, predicates, small_ints, str_lists

__all__ = ["int_lists", "predicates", "small_ints", "str_lists"]
