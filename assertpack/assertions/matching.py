"""Order-insensitive assertions over sequences and mappings.

Failures print only the non-matching elements of each side.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeVar

from assertpack.assertions.reporting import errorf_now
from assertpack.diff.unordered import non_matching_mappings, non_matching_sequences
from assertpack.handle.base import Handle
from assertpack.report.formatting import render_value

E = TypeVar("E")
K = TypeVar("K")

_MISMATCH_FORMAT = "Elements do not match\n > expected: %s\n < input:    %s\n"


def slices_match(
    tb: Handle,
    expected: Sequence[E] | None,
    input: Sequence[E] | None,
) -> None:
    """Assert that both sequences hold the same elements, in any order.

    Elements are compared with deep equality and duplicates must match by
    count. Sequences of different lengths fail without computing residues.
    """
    expected_length = len(expected) if expected is not None else 0
    input_length = len(input) if input is not None else 0
    if expected_length != input_length:
        errorf_now(
            tb,
            "Elements do not match, sequences have different lengths\n"
            " > expected length: %d\n"
            " < input length:    %d\n",
            expected_length,
            input_length,
        )
        return

    expected_no_match, input_no_match = non_matching_sequences(expected, input)
    if expected_no_match or input_no_match:
        errorf_now(
            tb,
            _MISMATCH_FORMAT,
            render_value(expected_no_match),
            render_value(input_no_match),
        )
        return


def maps_match(
    tb: Handle,
    expected: Mapping[K, E] | None,
    input: Mapping[K, E] | None,
) -> None:
    """Assert that both mappings hold deep-equal values under the same keys.

    There is no size shortcut, so ``None`` and an empty mapping match.
    """
    expected_no_match, input_no_match = non_matching_mappings(expected, input)
    if expected_no_match or input_no_match:
        errorf_now(
            tb,
            _MISMATCH_FORMAT,
            render_value(expected_no_match),
            render_value(input_no_match),
        )
        return
