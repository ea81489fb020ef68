"""Assertions about callbacks raising."""

from __future__ import annotations

from typing import Any, Callable

from assertpack.assertions.reporting import errorf_now
from assertpack.guard.capture import invoke_guarded
from assertpack.handle.base import Handle
from assertpack.report.config import get_active_report_config
from assertpack.report.formatting import render_callable, render_value


def panics(tb: Handle, fn: Callable[[], Any]) -> None:
    """Assert that calling ``fn`` raises an exception."""
    failure_format = "function %s did not panic\n > recovered value: %s\n"

    result = invoke_guarded(fn)
    if not result.raised:
        errorf_now(tb, failure_format, render_callable(fn), render_value(result.recovered))
        return


def not_panics(tb: Handle, fn: Callable[[], Any]) -> None:
    """Assert that calling ``fn`` returns without raising."""
    result = invoke_guarded(fn)
    if not result.raised:
        return

    config = get_active_report_config()
    if config.include_stack:
        errorf_now(
            tb,
            "function %s panicked\n > recovered value: %s\n > stack: %s\n",
            render_callable(fn),
            render_value(result.recovered, config),
            result.stack,
        )
        return

    errorf_now(
        tb,
        "function %s panicked\n > recovered value: %s\n",
        render_callable(fn),
        render_value(result.recovered, config),
    )
