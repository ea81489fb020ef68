"""Test handles that carry assertion outcomes back to the test framework."""

from assertpack.handle.base import Handle, format_message
from assertpack.handle.exceptions import HandleError, UnsupportedTestCaseError
from assertpack.handle.pytest_handle import PytestHandle
from assertpack.handle.recording import RecordingHandle
from assertpack.handle.unittest_handle import UnitTestHandle

__all__ = [
    "Handle",
    "HandleError",
    "UnsupportedTestCaseError",
    "PytestHandle",
    "RecordingHandle",
    "UnitTestHandle",
    "format_message",
]
