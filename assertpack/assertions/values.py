"""Assertions over single values."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from assertpack.assertions.reporting import errorf_now
from assertpack.core.equality import deep_equal
from assertpack.handle.base import Handle
from assertpack.report.formatting import render_value

T = TypeVar("T")


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


OrderedT = TypeVar("OrderedT", bound=SupportsOrdering)


def equal(tb: Handle, expected: T, input: T) -> None:
    """Assert that two values are deep-equal.

    Differently typed values never match and NaN never equals itself.
    """
    failure_format = "Values are not equal\n > expected: %s\n < input:    %s\n"

    if not deep_equal(expected, input):
        errorf_now(tb, failure_format, render_value(expected), render_value(input))


def within(tb: Handle, min_value: OrderedT, max_value: OrderedT, input: OrderedT) -> None:
    """Assert that ``min_value <= input <= max_value``."""
    failure_format = "value is not in the expected range\n > expected: [%s, %s]\n < input: %s\n"

    if input < min_value or input > max_value:
        errorf_now(
            tb,
            failure_format,
            render_value(min_value),
            render_value(max_value),
            render_value(input),
        )
        return
