# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Library configuration for fluentseq.

Settings are validated with a frozen Pydantic model and loaded from
FLUENTSEQ_* environment variables. Logging variables are read by
configure_logging alone, so they never affect sequence construction.
The process-wide default is cached and only consulted when a
FluentSequence is built without an explicit copy policy.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, ValidationError

from fluentseq._internal.exceptions import FluentseqValidationError
from fluentseq._internal.logging_utils import structured_extra
from fluentseq.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("fluentseq.config")

COPY_INPUT_ENV: Final[str] = "FLUENTSEQ_COPY_INPUT"

_ENV_FIELDS: Final[tuple[tuple[str, str], ...]] = (
    ("copy_input", COPY_INPUT_ENV),
)


class ConfigValidationError(FluentseqValidationError):
    """Raised when configuration data contains invalid values."""

    def __init__(self, error: ValidationError) -> None:
        """Initialize the exception from the underlying Pydantic error.

        Args:
            error: Validation error raised while building SequenceConfig.
        """
        self.error = error
        fields = ", ".join(".".join(str(part) for part in item["loc"]) for item in error.errors())
        super().__init__(f"Invalid fluentseq configuration: {fields}")


class SequenceConfig(BaseModel):
    """Validated settings shared by every sequence chain."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    copy_input: bool = False


def load_config(environ: Mapping[str, str] | None = None) -> SequenceConfig:
    """Build a SequenceConfig from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Validated configuration. Unset or blank variables keep their defaults.

    Raises:
        ConfigValidationError: If a variable holds a value that fails validation.
    """
    source = os.environ if environ is None else environ
    payload: dict[str, str] = {}
    for field, env_name in _ENV_FIELDS:
        raw = source.get(env_name)
        if raw is None or not raw.strip():
            continue
        payload[field] = raw.strip()
    try:
        config = SequenceConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigValidationError(exc) from exc
    logger.debug(
        "Loaded fluentseq configuration",
        extra=structured_extra(LogComponent.CONFIG, details=config.model_dump(mode="json")),
    )
    return config


@functools.cache
def default_config() -> SequenceConfig:
    """Return the process-wide configuration, loading it on first use."""
    return load_config()


def reset_default_config() -> None:
    """Forget the cached default so the next lookup re-reads the environment."""
    default_config.cache_clear()


__all__ = [
    "COPY_INPUT_ENV",
    "ConfigValidationError",
    "SequenceConfig",
    "default_config",
    "load_config",
    "reset_default_config",
]
