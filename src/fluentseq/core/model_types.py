# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import StrEnum


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    SEQUENCE = "sequence"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


class Operation(StrEnum):
    """Operations a FluentSequence chain can perform."""

    FILTER = "filter"
    MUTATE = "mutate"
    UNIQUE = "unique"
    TRANSFORM = "transform"

    @classmethod
    def from_str(cls, raw: str) -> Operation:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown operation '{raw}'") from exc


__all__ = ["LogComponent", "LogFormat", "Operation"]
