"""Test handle adapter for unittest.TestCase."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any
import unittest

from assertpack.handle.base import format_message
from assertpack.handle.exceptions import UnsupportedTestCaseError

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class UnitTestHandle:
    """Reports assertion failures through a ``unittest.TestCase``.

    A deferred ``fail`` is reported by a cleanup registered on the test case.
    """

    testcase: unittest.TestCase
    messages: list[str] = field(default_factory=list)
    _failed: bool = field(default=False, init=False, repr=False)
    _aborted: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.testcase, unittest.TestCase):
            raise UnsupportedTestCaseError(
                f"UnitTestHandle requires a unittest.TestCase, got {type(self.testcase).__name__}"
            )
        self.testcase.addCleanup(self.finalize)

    def fail(self) -> None:
        self._failed = True

    def fail_now(self) -> None:
        self._failed = True
        self._aborted = True
        self.testcase.fail(self._failure_text())

    def logf(self, format: str, *args: Any) -> None:
        message = format_message(format, args)
        self.messages.append(message)
        _LOGGER.info("%s", message.rstrip("\n"))

    def failed(self) -> bool:
        return self._failed

    def finalize(self) -> None:
        if self._failed and not self._aborted:
            self.testcase.fail(self._failure_text())

    def _failure_text(self) -> str:
        return "".join(self.messages).rstrip("\n") or "assertion failed"
