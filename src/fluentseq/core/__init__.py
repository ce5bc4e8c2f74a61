# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core vocabulary shared across fluentseq modules."""

from __future__ import annotations

from .model_types import LogComponent, LogFormat, Operation

__all__ = ["LogComponent", "LogFormat", "Operation"]
