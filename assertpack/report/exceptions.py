"""Report subsystem exceptions."""


class ReportError(Exception):
    """Base class for report subsystem errors."""


class ReportConfigError(ReportError):
    """Invalid report configuration."""
