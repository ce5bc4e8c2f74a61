# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for fluentseq."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fluentseq.core.model_types import Operation

__all__ = [
    "FluentseqError",
    "FluentseqTypeError",
    "FluentseqValidationError",
    "MissingCallbackError",
]


class FluentseqError(Exception):
    """Base error for all fluentseq exceptions."""


class FluentseqValidationError(FluentseqError, ValueError):
    """Raised when input data fails validation checks."""


class FluentseqTypeError(FluentseqError, TypeError):
    """Raised when input data has an unexpected type."""


class MissingCallbackError(FluentseqTypeError):
    """Raised when an operation is called without a usable callback."""

    def __init__(self, operation: Operation, argument: str, value: object = None) -> None:
        """Initialize the exception with the offending operation and argument.

        Args:
            operation: The sequence operation that required the callback.
            argument: Name of the parameter that should have held a callable.
            value: The value that was supplied instead.
        """
        self.operation = operation
        self.argument = argument
        self.value = value
        if value is None:
            detail = "is missing"
        else:
            detail = f"must be callable, got {type(value).__name__}"
        super().__init__(f"{operation.value}(): {argument} {detail}")
