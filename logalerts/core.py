"""
Core interfaces and data structures for Log Alerts notifications.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Alert:
    """Matched lines from one log file, ready to be sent."""
    log_name: str
    log_path: str
    lines: list[str]
    timestamp: datetime = field(default_factory=datetime.now)
    context: dict[str, Any] = field(default_factory=dict)  # Additional context for the alert

    @property
    def message(self) -> str:
        """The matched lines as one block of text, in file order."""
        return "".join(
            line if line.endswith("\n") else f"{line}\n"
            for line in self.lines
        )

    @property
    def summary(self) -> str:
        """One-line description of the alert."""
        count = len(self.lines)
        plural = "" if count == 1 else "s"
        return f"{count} matching line{plural} in {self.log_name}"


class Notifier(ABC):
    """
    Base class for all notifiers.

    Notifiers send alerts to external destinations.
    """

    def __init__(self, config: dict[str, Any]):
        """
        Initialize the notifier with configuration.

        Args:
            config: Type-specific configuration dictionary
        """
        self.config = config

    @abstractmethod
    def notify(self, alert: Alert) -> bool:
        """
        Send a notification about an alert.

        Args:
            alert: The alert to notify about

        Returns:
            True if notification was sent successfully, False otherwise
        """
        raise NotImplementedError
