"""
Console notifier for Log Alerts.
"""

from logalerts.core import Alert, Notifier
from logalerts.logging_config import get_logger
from logalerts.registry import register_notifier

logger = get_logger(__name__)


@register_notifier("console")
class ConsoleNotifier(Notifier):
    """
    Prints notifications to console/stdout.

    Useful for testing and debugging.

    Config:
        (none required)
    """

    def notify(self, alert: Alert) -> bool:
        """Print notification to console."""
        logger.info("Console alert for %s: %s", alert.log_name, alert.summary)

        print(f"\n{'=' * 60}")
        print(f"ALERT: {alert.log_name}")
        print(f"File: {alert.log_path}")
        print(f"Summary: {alert.summary}")
        if alert.context:
            print("\nContext:")
            for key, value in alert.context.items():
                print(f"  {key}: {value}")
        print()
        print(alert.message, end="")
        print(f"{'=' * 60}\n")
        return True


# Export for dynamic importing
__all__ = ["ConsoleNotifier"]
