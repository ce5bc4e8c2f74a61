# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Chainable operations over an ordered list of comparable elements.

FluentSequence wraps a list and exposes in-place operations that return
the same instance, so calls can be composed in a single expression::

    FluentSequence([4, 2, 2, 3, 4, 3, 6, 6, 5]).filter(is_even).unique().collect()

transform (also available as FluentSequence.map) is the only operation
that builds a new wrapper, since the element type may change.

A list passed to the constructor is aliased unless a copy is requested;
in-place operations rewrite it through slice assignment so the caller's list
and the chain never diverge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, override

from fluentseq._internal.collection_utils import dedupe_preserve, require_callable
from fluentseq._internal.exceptions import MissingCallbackError
from fluentseq._internal.logging_utils import structured_extra
from fluentseq.config import SequenceConfig, default_config
from fluentseq.core.model_types import LogComponent, Operation

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger: logging.Logger = logging.getLogger("fluentseq.sequence")

__all__ = ["ElementRef", "FluentSequence", "transform"]


@dataclass(slots=True)
class ElementRef[T]:
    """Writable handle to a single element, handed to mutate callbacks.

    Whatever value holds once the callback returns is stored back at
    index.
    """

    value: T
    index: int = field(default=0, compare=False)

    def set(self, value: T) -> None:
        """Replace the referenced element with value."""
        self.value = value


def _log_operation(operation: Operation, before: int, after: int) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "%s: %d -> %d items",
        operation.value,
        before,
        after,
        extra=structured_extra(
            LogComponent.SEQUENCE,
            operation=operation,
            before=before,
            after=after,
        ),
    )


def _ensure_callback(operation: Operation, argument: str, value: object) -> None:
    if not require_callable(value):
        raise MissingCallbackError(operation, argument, value)


class FluentSequence[T]:
    """Mutable ordered sequence with chainable in-place operations."""

    __slots__ = ("_items",)

    def __init__(
        self,
        initial: Iterable[T],
        *,
        copy: bool | None = None,
        config: SequenceConfig | None = None,
    ) -> None:
        """Wrap initial for chaining.

        Args:
            initial: Elements to operate on. A list is aliased unless a
                copy is requested; any other iterable is materialised into a
                new list.
            copy: Take a private copy of a list input. None defers to
                config.copy_input.
            config: Settings to consult when copy is None. Defaults to
                the process-wide configuration.
        """
        if copy is None:
            copy = (config or default_config()).copy_input
        if isinstance(initial, list) and not copy:
            self._items: list[T] = initial
        else:
            self._items = list(initial)

    def filter(self, predicate: Callable[[T], object]) -> FluentSequence[T]:
        """Keep only elements for which predicate is truthy, preserving order.

        Raises:
            MissingCallbackError: If predicate is missing or not callable.
        """
        _ensure_callback(Operation.FILTER, "predicate", predicate)
        before = len(self._items)
        self._items[:] = [item for item in self._items if predicate(item)]
        _log_operation(Operation.FILTER, before, len(self._items))
        return self

    def mutate(self, mutator: Callable[[ElementRef[T]], object]) -> FluentSequence[T]:
        """Call mutator once per element, in index order, and store what it leaves.

        The callback receives an ElementRef; its return value is ignored.

        Raises:
            MissingCallbackError: If mutator is missing or not callable.
        """
        _ensure_callback(Operation.MUTATE, "mutator", mutator)
        items = self._items
        for index, item in enumerate(items):
            ref = ElementRef(item, index)
            mutator(ref)
            items[index] = ref.value
        _log_operation(Operation.MUTATE, len(items), len(items))
        return self

    def unique(self) -> FluentSequence[T]:
        """Drop repeated values, keeping the first occurrence of each."""
        before = len(self._items)
        self._items[:] = dedupe_preserve(self._items)
        _log_operation(Operation.UNIQUE, before, len(self._items))
        return self

    def map[U](self, mapper: Callable[[T], U]) -> FluentSequence[U]:
        """Method form of transform."""
        return transform(self, mapper)

    def collect(self) -> list[T]:
        """Return the underlying list (not a copy)."""
        return self._items

    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def transform[T, U](source: FluentSequence[T], mapper: Callable[[T], U]) -> FluentSequence[U]:
    """Build a new sequence whose i-th element is mapper(source[i]).

    source is left untouched. Exceptions raised by mapper propagate
    unchanged.

    Raises:
        MissingCallbackError: If mapper is missing or not callable.
    """
    _ensure_callback(Operation.TRANSFORM, "mapper", mapper)
    mapped = [mapper(item) for item in source.collect()]
    _log_operation(Operation.TRANSFORM, source.length(), len(mapped))
    return FluentSequence(mapped, copy=False)
