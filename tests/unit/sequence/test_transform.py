# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for transform and FluentSequence.map."""

from __future__ import annotations

import pytest

from fluentseq import FluentSequence, MissingCallbackError, Operation, transform

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        pytest.param([], [], id="empty"),
        pytest.param([65, 66, 67], ["A", "B", "C"], id="int-to-char"),
    ],
)
def test_transform_codes_to_characters(values: list[int], expected: list[str]) -> None:
    assert transform(FluentSequence(values), chr).collect() == expected


def test_transform_to_bool() -> None:
    result = transform(FluentSequence([1, 2, 3, 4]), lambda item: item % 2 == 0)
    assert result.collect() == [False, True, False, True]


def test_transform_builds_independent_sequence() -> None:
    values = [1, 2, 3]
    source = FluentSequence(values)
    mapped = transform(source, lambda item: item * 10)

    assert mapped is not source
    assert mapped.collect() is not values
    assert values == [1, 2, 3]
    _ = mapped.filter(lambda item: item > 10)
    assert source.collect() == [1, 2, 3]


def test_map_method_matches_transform() -> None:
    source = FluentSequence([1, 2, 3])
    assert source.map(str).collect() == transform(source, str).collect() == ["1", "2", "3"]


def test_transform_rejects_missing_mapper() -> None:
    with pytest.raises(MissingCallbackError) as excinfo:
        _ = transform(FluentSequence([1]), None)  # type: ignore[arg-type]
    assert excinfo.value.operation is Operation.TRANSFORM
    assert excinfo.value.argument == "mapper"


def test_transform_propagates_mapper_errors() -> None:
    with pytest.raises(ZeroDivisionError):
        _ = transform(FluentSequence([1, 0]), lambda item: 1 // item)
