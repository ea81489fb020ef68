"""Order-insensitive residue computation for sequences and mappings."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from assertpack.core.equality import deep_equal, keyed_by_type

E = TypeVar("E")
K = TypeVar("K")

_MISSING = object()


def non_matching_sequences(
    a: Sequence[E] | None,
    b: Sequence[E] | None,
) -> tuple[list[E], list[E]]:
    """Return the elements of ``a`` and ``b`` that have no counterpart in the other.

    Matching is greedy and duplicate-aware: each element claims the first
    unclaimed deep-equal element on the other side. Elements only need to
    support deep equality, so this is O(n*m) rather than hash or sort based.
    """
    left = list(a) if a is not None else []
    right = list(b) if b is not None else []
    return _unclaimed(left, right), _unclaimed(right, left)


def _unclaimed(source: list[E], candidates: list[E]) -> list[E]:
    claimed = [False] * len(candidates)
    residue: list[E] = []

    for element in source:
        for index, candidate in enumerate(candidates):
            if not claimed[index] and deep_equal(element, candidate):
                claimed[index] = True
                break
        else:
            residue.append(element)

    return residue


def non_matching_mappings(
    a: Mapping[K, E] | None,
    b: Mapping[K, E] | None,
) -> tuple[dict[K, E], dict[K, E]]:
    """Return the entries of ``a`` and ``b`` that are missing from or differ in the other.

    Keys are matched type-strictly, so ``1`` and ``True`` are different keys.
    Keys whose values are deep-equal on both sides are left out of both residues.
    """
    left: Mapping[K, E] = a if a is not None else {}
    right: Mapping[K, E] = b if b is not None else {}

    left_index = keyed_by_type(left)
    right_index = keyed_by_type(right)

    left_out: dict[K, E] = {}
    right_out: dict[K, E] = {}

    for key, left_value in left.items():
        right_value: Any = right_index.get((type(key), key), _MISSING)
        if right_value is _MISSING:
            left_out[key] = left_value
            continue
        if not deep_equal(left_value, right_value):
            left_out[key] = left_value
            right_out[key] = right_value

    for key, right_value in right.items():
        # Keys present on both sides were handled above.
        if (type(key), key) not in left_index:
            right_out[key] = right_value

    return left_out, right_out
