"""Test handle exceptions."""


class HandleError(Exception):
    """Base class for test handle errors."""


class UnsupportedTestCaseError(HandleError):
    """Raised when a unittest adapter is built around something that is not a TestCase."""
