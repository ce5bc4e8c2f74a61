# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from fluentseq._internal.exceptions import (
    FluentseqError,
    FluentseqTypeError,
    FluentseqValidationError,
    MissingCallbackError,
)

from ..config import ConfigValidationError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    FluentseqError: ErrorCode("FS000"),
    FluentseqValidationError: ErrorCode("FS100"),
    FluentseqTypeError: ErrorCode("FS101"),
    ConfigValidationError: ErrorCode("FS110"),
    MissingCallbackError: ErrorCode("FS120"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured fluentseq exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("FS000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes."""

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
