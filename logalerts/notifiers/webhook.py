"""
Webhook notifier for Log Alerts.
"""

import requests

from logalerts.core import Alert, Notifier
from logalerts.logging_config import get_logger
from logalerts.registry import register_notifier

logger = get_logger(__name__)


@register_notifier("webhook")
class WebhookNotifier(Notifier):
    """
    Sends notifications via HTTP webhook.

    Config:
        url: Webhook URL to POST to
        method: HTTP method (default: POST)
        headers: Optional HTTP headers
        timeout: Request timeout in seconds (default: 10)
    """

    def notify(self, alert: Alert) -> bool:
        """Send notification via webhook."""
        url = self.config["url"]
        method = self.config.get("method", "POST").upper()
        headers = self.config.get("headers", {})
        timeout = self.config.get("timeout", 10)

        payload = {
            "log_name": alert.log_name,
            "log_path": alert.log_path,
            "summary": alert.summary,
            "lines": alert.lines,
            "context": alert.context,
            "timestamp": alert.timestamp.isoformat(),
        }

        try:
            if method == "POST":
                response = requests.post(url, json=payload, headers=headers, timeout=timeout)
            elif method == "PUT":
                response = requests.put(url, json=payload, headers=headers, timeout=timeout)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

            response.raise_for_status()
            logger.info(
                "Webhook notification sent successfully for %s to %s",
                alert.log_name,
                url
            )
            return True
        except requests.RequestException:
            logger.error(
                "Failed to send webhook notification for %s",
                alert.log_name,
                exc_info=True
            )
            return False


# Export for dynamic importing
__all__ = ["WebhookNotifier"]
