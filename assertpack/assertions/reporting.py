"""Shared failure path for every assertion."""

from __future__ import annotations

from typing import Any

from assertpack.handle.base import Handle


def errorf_now(tb: Handle, format: str, *args: Any) -> None:
    """Log a formatted diagnostic on ``tb`` and abort the current test."""
    tb.logf(format, *args)
    tb.fail_now()
