# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""JSON helpers used when rendering structured log payloads."""

from __future__ import annotations

from enum import Enum

__all__ = ["JSONValue", "normalise_enums_for_json"]

type JSONValue = str | int | float | bool | dict[str, JSONValue] | list[JSONValue] | None


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values into their string values."""
    if isinstance(value, Enum):
        return normalise_enums_for_json(value.value)
    if isinstance(value, dict):
        result: dict[str, JSONValue] = {}
        for key, item in value.items():
            norm_key = key.value if isinstance(key, Enum) else str(key)
            result[str(norm_key)] = normalise_enums_for_json(item)
        return result
    if isinstance(value, (list, tuple)):
        return [normalise_enums_for_json(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
