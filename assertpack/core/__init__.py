"""Core comparison primitives for assertkit."""

from assertpack.core.equality import deep_equal, keyed_by_type

__all__ = [
    "deep_equal",
    "keyed_by_type",
]
