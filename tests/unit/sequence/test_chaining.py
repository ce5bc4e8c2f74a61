# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for multi-step FluentSequence chains."""

from __future__ import annotations

import pytest

from fluentseq import ElementRef, FluentSequence, transform

pytestmark = pytest.mark.unit


def _is_even(item: int) -> bool:
    return item % 2 == 0


def _double(ref: ElementRef[int]) -> None:
    ref.value *= 2


def test_filter_then_mutate_then_transform() -> None:
    result = FluentSequence(list(range(1, 11))).filter(_is_even).mutate(_double).collect()
    assert result == [4, 8, 12, 16, 20]

    letters = transform(FluentSequence(result), lambda item: chr(item + 64)).collect()
    assert letters == ["D", "H", "L", "P", "T"]


def test_filter_unique_mutate() -> None:
    result = (
        FluentSequence([4, 2, 2, 3, 4, 3, 6, 6, 5])
        .filter(_is_even)
        .unique()
        .mutate(_double)
        .collect()
    )
    assert result == [8, 4, 12]


def test_zero_values_chain() -> None:
    def _increment(ref: ElementRef[int]) -> None:
        ref.value += 1

    result = FluentSequence([0, 0, 0]).filter(lambda item: item == 0).mutate(_increment)
    assert result.collect() == [1, 1, 1]


def test_large_sequence_chain() -> None:
    result = FluentSequence(list(range(1000))).filter(_is_even).mutate(_double).collect()

    assert len(result) == 500
    assert result[0] == 0
    assert result[-1] == 1996


@pytest.mark.parametrize("step", ["filter", "mutate", "unique"])
def test_empty_sequence_operations_stay_empty(step: str) -> None:
    seq = FluentSequence[int]([])
    match step:
        case "filter":
            _ = seq.filter(_is_even)
        case "mutate":
            _ = seq.mutate(_double)
        case _:
            _ = seq.unique()
    assert seq.collect() == []
    assert seq.length() == 0
