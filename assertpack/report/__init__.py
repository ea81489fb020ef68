"""Diagnostic configuration and rendering for assertkit."""

from assertpack.report.config import (
    DEFAULT_REPORT_CONFIG,
    INCLUDE_STACK_ENV_VAR,
    MAX_REPR_ENV_VAR,
    ReportConfig,
    get_active_report_config,
    use_report_config,
)
from assertpack.report.exceptions import ReportConfigError, ReportError
from assertpack.report.formatting import render_callable, render_error, render_value, truncate

__all__ = [
    "ReportError",
    "ReportConfigError",
    "ReportConfig",
    "DEFAULT_REPORT_CONFIG",
    "MAX_REPR_ENV_VAR",
    "INCLUDE_STACK_ENV_VAR",
    "get_active_report_config",
    "use_report_config",
    "render_value",
    "render_error",
    "render_callable",
    "truncate",
]
