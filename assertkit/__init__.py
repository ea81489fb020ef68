"""Stable public API surface for assertkit.

This module is the supported import path for library users. Every assertion
takes a test handle first; on mismatch it logs a diagnostic through the
handle and aborts the current test.
"""

from __future__ import annotations

from assertpack.assertions import (
    equal,
    error,
    errors_match,
    maps_match,
    no_error,
    not_panics,
    panics,
    slices_match,
    within,
)
from assertpack.core import deep_equal
from assertpack.diff import non_matching_mappings, non_matching_sequences
from assertpack.guard import GuardedResult, invoke_guarded
from assertpack.handle import Handle, PytestHandle, RecordingHandle, UnitTestHandle
from assertpack.report import ReportConfig, ReportConfigError, use_report_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Handle",
    "PytestHandle",
    "RecordingHandle",
    "UnitTestHandle",
    "ReportConfig",
    "ReportConfigError",
    "GuardedResult",
    "use_report_config",
    "deep_equal",
    "non_matching_sequences",
    "non_matching_mappings",
    "invoke_guarded",
    "no_error",
    "error",
    "errors_match",
    "equal",
    "slices_match",
    "maps_match",
    "within",
    "panics",
    "not_panics",
]
