"""Fault-isolated execution of test callbacks."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import traceback
from typing import Any, Callable

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GuardedResult:
    """Outcome of running a callback under :func:`invoke_guarded`."""

    raised: bool
    recovered: BaseException | None = None
    stack: str = ""


def invoke_guarded(fn: Callable[[], Any]) -> GuardedResult:
    """Run ``fn`` and convert any ``Exception`` it raises into a result.

    The stack is formatted inside the handler so it shows the frames down to
    the raise point. ``BaseException`` subclasses that are not ``Exception``
    (interrupts, exits, test-abort outcomes) are not captured.
    """
    raised = True
    recovered: BaseException | None = None
    stack = ""
    try:
        fn()
        raised = False
    except Exception as error:
        recovered = error
        stack = traceback.format_exc()
    finally:
        if raised and recovered is not None:
            _LOGGER.debug(
                "guarded callback raised %s: %s",
                recovered.__class__.__name__,
                recovered,
            )

    return GuardedResult(raised=raised, recovered=recovered, stack=stack)
