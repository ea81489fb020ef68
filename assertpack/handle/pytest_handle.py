"""Test handle backed by pytest outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import pytest

from assertpack.handle.base import format_message

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class PytestHandle:
    """Reports assertion failures to the running pytest test.

    ``fail_now`` raises pytest's failure outcome with every diagnostic logged
    so far. ``fail`` only marks the test failed; :meth:`finalize` turns such a
    deferred failure into a pytest failure once the test body is done.
    """

    nodeid: str | None = None
    messages: list[str] = field(default_factory=list)
    _failed: bool = field(default=False, init=False, repr=False)
    _aborted: bool = field(default=False, init=False, repr=False)

    def fail(self) -> None:
        self._failed = True

    def fail_now(self) -> None:
        self._failed = True
        self._aborted = True
        pytest.fail(self._failure_text(), pytrace=False)

    def logf(self, format: str, *args: Any) -> None:
        message = format_message(format, args)
        self.messages.append(message)
        _LOGGER.info("%s", message.rstrip("\n"))

    def failed(self) -> bool:
        return self._failed

    def finalize(self) -> None:
        if self._failed and not self._aborted:
            pytest.fail(self._failure_text(), pytrace=False)

    def _failure_text(self) -> str:
        text = "".join(self.messages).rstrip("\n")
        if not text:
            text = "assertion failed"
        if self.nodeid:
            return f"{self.nodeid}: {text}"
        return text
