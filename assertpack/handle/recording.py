"""Recording test double used to exercise assertions without failing the caller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from assertpack.handle.base import format_message


@dataclass(slots=True)
class RecordingHandle:
    """Swallows fail and log signals and exposes them for inspection.

    ``fail_now`` records the failure but does not abort, so an assertion
    under test simply returns after reporting. ``must_fail`` declares the
    outcome the caller expects; :meth:`expect_outcome` checks it.
    """

    must_fail: bool = False
    messages: list[str] = field(default_factory=list)
    fail_calls: int = 0
    fail_now_calls: int = 0

    def fail(self) -> None:
        self.fail_calls += 1

    def fail_now(self) -> None:
        self.fail_now_calls += 1

    def logf(self, format: str, *args: Any) -> None:
        self.messages.append(format_message(format, args))

    def failed(self) -> bool:
        return self.fail_calls > 0 or self.fail_now_calls > 0

    @property
    def output(self) -> str:
        return "".join(self.messages)

    def expect_outcome(self) -> None:
        failed = self.failed()
        if failed != self.must_fail:
            raise AssertionError(
                "Failure was not as expected:\n"
                f" > expected: {self.must_fail}\n"
                f" < actual: {failed}\n"
                f"{self.output}"
            )
