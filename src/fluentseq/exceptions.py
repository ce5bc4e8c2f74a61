# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from fluentseq._internal.exceptions import (
    FluentseqError,
    FluentseqTypeError,
    FluentseqValidationError,
    MissingCallbackError,
)

__all__ = [
    "FluentseqError",
    "FluentseqTypeError",
    "FluentseqValidationError",
    "MissingCallbackError",
]
