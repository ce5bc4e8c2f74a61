# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public collections helpers (stable shim over internal implementations)."""

from __future__ import annotations

from fluentseq._internal.collection_utils import dedupe_preserve

__all__ = ["dedupe_preserve"]
