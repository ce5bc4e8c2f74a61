# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public accessors for fluentseq error code metadata."""

from __future__ import annotations

from fluentseq._internal.error_codes import ErrorCode, error_code_catalog, error_code_for

__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
