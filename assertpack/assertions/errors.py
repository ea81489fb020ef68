"""Assertions over error values."""

from __future__ import annotations

from assertpack.assertions.reporting import errorf_now
from assertpack.handle.base import Handle
from assertpack.report.formatting import render_error


def no_error(tb: Handle, error: BaseException | None) -> None:
    """Assert that ``error`` is ``None``."""
    failure_format = "Unexpected error occurred\n > Error: %s\n"

    if error is not None:
        errorf_now(tb, failure_format, render_error(error))
        return


def error(tb: Handle, error: BaseException | None) -> None:
    """Assert that ``error`` is not ``None``."""
    failure_format = "expected error did not occur\n"

    if error is None:
        errorf_now(tb, failure_format)
        return


def errors_match(
    tb: Handle,
    expected: BaseException | None,
    input: BaseException | None,
) -> None:
    """Assert that both errors are ``None`` or both carry the same message.

    This keeps table-driven tests down to a single expected-error field.
    """
    failure_format = "Errors do not match\n > expected: %s\n < input:    %s\n"

    # The same object (including both None) always matches.
    if expected is input:
        return

    # Never stringify a missing error.
    if expected is None or input is None:
        errorf_now(tb, failure_format, render_error(expected), render_error(input))
        return

    if str(expected) != str(input):
        errorf_now(tb, failure_format, render_error(expected), render_error(input))
        return
