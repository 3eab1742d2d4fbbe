"""Report domain specific exceptions."""


class ReportError(Exception):
    """Base class for report errors."""


class InvalidReportWindowError(ReportError):
    """Raised when the start date lies after the end date."""


class ReportUnavailableError(ReportError):
    """Raised when the store could not produce the report; no series is returned."""
