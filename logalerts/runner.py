"""
One-shot runner: read every configured log and send matched lines.

Scheduling is left to the caller (cron, systemd timers); each call to
``LogAlertsRunner.run`` performs a single pass and returns.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from logalerts.config import Config, LogConfig, load_config
from logalerts.core import Alert, Notifier
from logalerts.errors import InvalidFilterError
from logalerts.log_source import LogSource
from logalerts.logging_config import get_logger
from logalerts.plugins import create_notifier

logger = get_logger(__name__)


@dataclass
class LogResult:
    """Outcome of checking one log file."""
    name: str
    path: str
    lines: list[str] = field(default_factory=list)
    error: str | None = None
    notified: int = 0  # Number of notifiers that accepted the alert

    @property
    def ok(self) -> bool:
        """True if the log was read."""
        return self.error is None


@dataclass
class RunReport:
    """Outcome of one pass over all configured logs."""
    started: datetime
    results: list[LogResult] = field(default_factory=list)

    @property
    def failed(self) -> list[LogResult]:
        """Logs that could not be read."""
        return [r for r in self.results if not r.ok]

    @property
    def matched_lines(self) -> int:
        """Total number of matched lines across all logs."""
        return sum(len(r.lines) for r in self.results)


def read_matching_lines(log_config: LogConfig, today: date | None = None) -> list[str]:
    """
    Read the lines of one configured log that pass its filter.

    Raises:
        FileNotFoundError: If the log file does not exist or is inaccessible
        InvalidFilterError: If the rendered filter is not a valid pattern
    """
    with LogSource(log_config.path, log_config.resolve_filter(today)) as source:
        return source.read_into_array()


class LogAlertsRunner:
    """Reads configured logs and hands matched lines to the notifiers."""

    def __init__(self, config: Config, notifiers: list[Notifier] | None = None) -> None:
        """
        Initialize the runner.

        Args:
            config: Validated configuration
            notifiers: Notifier instances to use (default: built from config)
        """
        self.config = config
        if notifiers is None:
            notifiers = [
                create_notifier(n.type, n.config)
                for n in config.notifier_configs()
            ]
        self.notifiers = notifiers

    @classmethod
    def from_file(cls, config_path: str) -> "LogAlertsRunner":
        """Create a runner from a YAML configuration file."""
        return cls(load_config(config_path))

    def check_log(self, log_config: LogConfig, today: date | None = None) -> LogResult:
        """Read one log, recording a failure instead of raising."""
        result = LogResult(name=log_config.display_name, path=log_config.path)
        try:
            result.lines = read_matching_lines(log_config, today)
        except (FileNotFoundError, InvalidFilterError) as e:
            logger.warning("Skipping %s: %s", log_config.path, e)
            result.error = str(e)
            return result

        logger.info("Checked %s: %d matching line(s)", log_config.path, len(result.lines))
        return result

    def dispatch(self, alert: Alert) -> int:
        """
        Send an alert to every notifier.

        Returns:
            Number of notifiers that reported success
        """
        sent = 0
        for notifier in self.notifiers:
            try:
                if notifier.notify(alert):
                    sent += 1
                else:
                    logger.warning(
                        "Notifier %s returned False for %s",
                        notifier.__class__.__name__,
                        alert.log_name
                    )
            except Exception:
                logger.error(
                    "Error sending notification via %s for %s",
                    notifier.__class__.__name__,
                    alert.log_name,
                    exc_info=True
                )
        return sent

    def run(self, dry_run: bool = False, today: date | None = None) -> RunReport:
        """
        Check every configured log once.

        Args:
            dry_run: Read logs without sending notifications
            today: Date used to render filter templates (default: today)

        Returns:
            RunReport with one result per configured log
        """
        report = RunReport(started=datetime.now())
        logger.info("Checking %d log(s)", len(self.config.logs))

        for log_config in self.config.logs:
            result = self.check_log(log_config, today)
            report.results.append(result)

            if not result.lines:
                continue

            if dry_run:
                logger.info("Dry run: not sending %d line(s) from %s", len(result.lines), result.path)
                continue

            alert = Alert(log_name=result.name, log_path=result.path, lines=result.lines)
            pattern = log_config.resolve_filter(today)
            if pattern is not None:
                alert.context["filter"] = pattern
            result.notified = self.dispatch(alert)

        logger.info(
            "Run complete: %d matching line(s), %d log(s) skipped",
            report.matched_lines,
            len(report.failed)
        )
        return report
