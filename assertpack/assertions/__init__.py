"""Assertion surface for assertkit."""

from assertpack.assertions.errors import error, errors_match, no_error
from assertpack.assertions.matching import maps_match, slices_match
from assertpack.assertions.panics import not_panics, panics
from assertpack.assertions.reporting import errorf_now
from assertpack.assertions.values import equal, within

__all__ = [
    "no_error",
    "error",
    "errors_match",
    "equal",
    "slices_match",
    "maps_match",
    "within",
    "panics",
    "not_panics",
    "errorf_now",
]
