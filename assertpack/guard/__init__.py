"""Fault capture for panic assertions."""

from assertpack.guard.capture import GuardedResult, invoke_guarded

__all__ = [
    "GuardedResult",
    "invoke_guarded",
]
