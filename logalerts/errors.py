"""
Exception types raised by Log Alerts.
"""


class LogAlertsError(Exception):
    """Base class for Log Alerts errors."""


class ClosedResourceError(LogAlertsError):
    """Raised when reading from a log source whose file handle was released."""

    MESSAGE = "Unable to return line because the file handle is closed"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


class InvalidFilterError(LogAlertsError, ValueError):
    """Raised when a filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")
        self.pattern = pattern
