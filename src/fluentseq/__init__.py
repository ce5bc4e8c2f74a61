# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""fluentseq - chainable helpers for ordered sequences.

Wraps a list in a FluentSequence whose filter, mutate and unique
operations rewrite it in place and return the same wrapper, with
transform producing a new wrapper over mapped elements.
"""

from __future__ import annotations

from fluentseq._internal.exceptions import (
    FluentseqError,
    FluentseqTypeError,
    FluentseqValidationError,
    MissingCallbackError,
)

from .config import ConfigValidationError, SequenceConfig, default_config, load_config
from .core.model_types import Operation
from .error_codes import error_code_for
from .logging import configure_logging
from .sequence import ElementRef, FluentSequence, transform

__all__ = [
    "__version__",
    "ConfigValidationError",
    "ElementRef",
    "FluentSequence",
    "FluentseqError",
    "FluentseqTypeError",
    "FluentseqValidationError",
    "MissingCallbackError",
    "Operation",
    "SequenceConfig",
    "configure_logging",
    "default_config",
    "error_code_for",
    "load_config",
    "transform",
]

__version__ = "0.1.0"
