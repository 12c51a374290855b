"""
Email notifier for Log Alerts.
"""

import smtplib
from email.message import EmailMessage
from email.utils import formatdate

from logalerts.core import Alert, Notifier
from logalerts.logging_config import get_logger
from logalerts.registry import register_notifier

logger = get_logger(__name__)


@register_notifier("email")
class EmailNotifier(Notifier):
    """
    Sends matched log lines by email.

    Config:
        recipients: List of recipient email addresses
        from_addr: Sender email address (default: logalerts@localhost)
        smtp_host: SMTP server hostname (default: localhost)
        smtp_port: SMTP server port (default: 25)
        username: SMTP username (optional)
        password: SMTP password (optional)
        use_tls: Issue STARTTLS before sending (default: False)
        timeout: Socket timeout in seconds (default: 30)
        subject_prefix: Prefix for the subject line (default: [logalerts])
    """

    def build_message(self, alert: Alert) -> EmailMessage:
        """Compose the email for an alert."""
        prefix = self.config.get("subject_prefix", "[logalerts]")

        msg = EmailMessage()
        msg["Subject"] = f"{prefix} {alert.summary}".strip()
        msg["From"] = self.config.get("from_addr", "logalerts@localhost")
        msg["To"] = ", ".join(self.config["recipients"])
        msg["Date"] = formatdate(localtime=True)

        body = [
            f"Log: {alert.log_name} ({alert.log_path})",
            f"Checked: {alert.timestamp.isoformat(timespec='seconds')}",
            "",
            alert.message,
        ]
        msg.set_content("\n".join(body))
        return msg

    def notify(self, alert: Alert) -> bool:
        """Send the alert to every recipient."""
        recipients = self.config["recipients"]
        host = self.config.get("smtp_host", "localhost")
        port = self.config.get("smtp_port", 25)
        username = self.config.get("username")
        password = self.config.get("password")

        msg = self.build_message(alert)

        try:
            with smtplib.SMTP(host, port, timeout=self.config.get("timeout", 30.0)) as smtp:
                if self.config.get("use_tls", False):
                    smtp.starttls()
                if username and password:
                    smtp.login(username, password)
                smtp.send_message(msg, to_addrs=recipients)
            logger.info(
                "Email sent for %s to %d recipient(s)",
                alert.log_name, len(recipients)
            )
            return True
        except (smtplib.SMTPException, OSError):
            logger.error(
                "Failed to send email for %s via %s:%s",
                alert.log_name,
                host,
                port,
                exc_info=True
            )
            return False


# Export for dynamic importing
__all__ = ["EmailNotifier"]
