"""Capability protocol consumed from the owning test framework."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Handle(Protocol):
    """What an assertion needs from the test that called it.

    ``fail`` marks the test failed and lets it continue, ``fail_now`` marks it
    failed and aborts it, ``logf`` records a %-style formatted diagnostic and
    ``failed`` reports whether any failure was recorded so far.
    """

    def fail(self) -> None: ...

    def fail_now(self) -> None: ...

    def logf(self, format: str, *args: Any) -> None: ...

    def failed(self) -> bool: ...


def format_message(format: str, args: tuple[Any, ...]) -> str:
    return format % args if args else format
