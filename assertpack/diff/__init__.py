"""Unordered collection diffing for assertkit."""

from assertpack.diff.unordered import non_matching_mappings, non_matching_sequences

__all__ = [
    "non_matching_sequences",
    "non_matching_mappings",
]
