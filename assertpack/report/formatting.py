"""Rendering helpers for failure diagnostics."""

from __future__ import annotations

from typing import Any, Callable

from assertpack.report.config import ReportConfig, get_active_report_config


def render_value(value: Any, config: ReportConfig | None = None) -> str:
    resolved = config or get_active_report_config()
    return truncate(repr(value), max_length=resolved.max_repr_length)


def render_error(error: BaseException | None, config: ReportConfig | None = None) -> str:
    if error is None:
        return "None"
    resolved = config or get_active_report_config()
    return truncate(str(error), max_length=resolved.max_repr_length)


def render_callable(fn: Callable[..., Any]) -> str:
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        return repr(fn)
    module = getattr(fn, "__module__", None)
    return f"{module}.{name}" if module else str(name)


def truncate(text: str, *, max_length: int) -> str:
    """Shorten ``text`` to ``max_length`` characters, noting how much was dropped."""
    if len(text) <= max_length:
        return text
    omitted = len(text) - max_length
    return f"{text[:max_length]}...({omitted} more chars)"
