"""Structural deep-equality primitive shared by value and collection assertions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
import dataclasses
import enum
import types
from typing import Any

_MISSING = object()

_SCALAR_TYPES = (bool, int, float, complex, str, bytes, bytearray)
_IDENTITY_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    type,
)


def deep_equal(left: Any, right: Any) -> bool:
    """Compare two values by structure instead of by reference.

    Values of different dynamic types are never equal (``True`` is not ``1``),
    and NaN is never equal to itself, even when nested inside two distinct
    containers. The very same ``list`` or ``dict`` object is equal to itself
    without descending into it.
    """
    return _deep_equal(left, right, in_progress=set())


def _deep_equal(left: Any, right: Any, *, in_progress: set[tuple[int, int]]) -> bool:
    if left is None or right is None:
        return left is right

    if type(left) is not type(right):
        return False

    if isinstance(left, _SCALAR_TYPES) or isinstance(left, enum.Enum):
        return bool(left == right)

    if isinstance(left, _IDENTITY_TYPES):
        return left is right

    if isinstance(left, (list, dict)) and left is right:
        return True

    # A pair already being compared further up the stack is a reference cycle.
    pair = (id(left), id(right))
    if pair in in_progress:
        return True
    in_progress.add(pair)
    try:
        return _composite_equal(left, right, in_progress=in_progress)
    finally:
        in_progress.discard(pair)


def _composite_equal(left: Any, right: Any, *, in_progress: set[tuple[int, int]]) -> bool:
    if isinstance(left, Mapping):
        return _mappings_equal(left, right, in_progress=in_progress)

    if isinstance(left, Sequence):
        return _sequences_equal(left, right, in_progress=in_progress)

    if isinstance(left, Set):
        return _sets_equal(left, right, in_progress=in_progress)

    if dataclasses.is_dataclass(left):
        return all(
            _deep_equal(
                getattr(left, item.name, _MISSING),
                getattr(right, item.name, _MISSING),
                in_progress=in_progress,
            )
            for item in dataclasses.fields(left)
        )

    if isinstance(left, BaseException):
        return _deep_equal(left.args, right.args, in_progress=in_progress) and _deep_equal(
            _instance_state(left),
            _instance_state(right),
            in_progress=in_progress,
        )

    if type(left).__eq__ is object.__eq__:
        return _deep_equal(
            _instance_state(left),
            _instance_state(right),
            in_progress=in_progress,
        )

    return _values_equal(left, right)


def _values_equal(left: Any, right: Any) -> bool:
    try:
        return _truthy(left == right)
    except Exception:
        # An outcome with no definite truth value means the values do not match.
        return False


def _truthy(outcome: Any) -> bool:
    if isinstance(outcome, bool):
        return outcome
    try:
        return bool(outcome)
    except Exception:
        if not isinstance(outcome, Iterable):
            raise
    # Elementwise comparison results (array-likes) reduce to "every element matched".
    return all(_truthy(item) for item in outcome)


def keyed_by_type(mapping: Mapping[Any, Any]) -> dict[tuple[type, Any], Any]:
    """Index a mapping so that keys of different types never collide.

    ``1``, ``1.0`` and ``True`` hash alike and are one key to a plain dict; here
    they stay distinct.
    """
    return {(type(key), key): value for key, value in mapping.items()}


def _mappings_equal(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    *,
    in_progress: set[tuple[int, int]],
) -> bool:
    if len(left) != len(right):
        return False

    right_index = keyed_by_type(right)
    for key, left_value in left.items():
        right_value = right_index.get((type(key), key), _MISSING)
        if right_value is _MISSING:
            return False
        if not _deep_equal(left_value, right_value, in_progress=in_progress):
            return False
    return True


def _sequences_equal(
    left: Sequence[Any],
    right: Sequence[Any],
    *,
    in_progress: set[tuple[int, int]],
) -> bool:
    if len(left) != len(right):
        return False

    return all(
        _deep_equal(left_item, right_item, in_progress=in_progress)
        for left_item, right_item in zip(left, right)
    )


def _sets_equal(
    left: Set[Any],
    right: Set[Any],
    *,
    in_progress: set[tuple[int, int]],
) -> bool:
    if len(left) != len(right):
        return False

    candidates = list(right)
    claimed = [False] * len(candidates)
    for item in left:
        for index, candidate in enumerate(candidates):
            if not claimed[index] and _deep_equal(item, candidate, in_progress=in_progress):
                claimed[index] = True
                break
        else:
            return False
    return True


def _instance_state(value: Any) -> dict[str, Any]:
    state = dict(getattr(value, "__dict__", {}))
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in {"__dict__", "__weakref__"}:
                continue
            state[name] = getattr(value, name, _MISSING)
    return state
